# domain/model/chirp.py

from dataclasses import dataclass

MAX_CHIRP_LENGTH = 140


@dataclass(frozen=True)
class Chirp:
    """A stored post. Immutable once created."""
    id: int
    body: str


def is_valid_body(body: str) -> bool:
    return len(body) <= MAX_CHIRP_LENGTH
