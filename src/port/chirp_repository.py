"""Port definition for ChirpRepository."""

from typing import Protocol

from domain.model.chirp import Chirp


class ChirpRepository(Protocol):
    def create_chirp(self, body: str) -> Chirp: ...

    def list_chirps(self) -> list[Chirp]: ...

    def get_chirp(self, chirp_id: int) -> Chirp: ...
