"""In-memory implementation of ChirpRepository for testing."""

from domain.model.chirp import MAX_CHIRP_LENGTH, Chirp, is_valid_body
from domain.model.errors import NotFoundError, ValidationError
from domain.model.identity import next_id


class FakeChirpRepository:
    def __init__(self):
        self.store: dict[int, Chirp] = {}

    def create_chirp(self, body: str) -> Chirp:
        if not is_valid_body(body):
            raise ValidationError(f"Chirp body exceeds {MAX_CHIRP_LENGTH} characters")

        chirp = Chirp(id=next_id(self.store), body=body)
        self.store[chirp.id] = chirp
        return chirp

    def list_chirps(self) -> list[Chirp]:
        return [self.store[chirp_id] for chirp_id in sorted(self.store)]

    def get_chirp(self, chirp_id: int) -> Chirp:
        chirp = self.store.get(chirp_id)
        if chirp is None:
            raise NotFoundError(f"Chirp {chirp_id} not found")
        return chirp
