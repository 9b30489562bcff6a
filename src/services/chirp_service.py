"""Chirp service — validates and filters posts before they reach storage."""

import logging
from collections.abc import Callable

from domain.model.chirp import MAX_CHIRP_LENGTH, Chirp
from domain.model.errors import ChirpTooLongError
from port.chirp_repository import ChirpRepository
from utils.profanity import filter_profanity

logger = logging.getLogger(__name__)


def submit_chirp(
    repo: ChirpRepository,
    raw_body: str,
    profanity_filter: Callable[[str], str] = filter_profanity,
) -> Chirp:
    """Create a chirp from user input.

    Length is measured before filtering.

    Raises:
        ChirpTooLongError: body is over MAX_CHIRP_LENGTH characters
    """
    if len(raw_body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError(len(raw_body), MAX_CHIRP_LENGTH)

    chirp = repo.create_chirp(profanity_filter(raw_body))
    logger.info("Chirp submitted", extra={"chirpId": chirp.id})
    return chirp


def list_chirps(repo: ChirpRepository) -> list[Chirp]:
    return repo.list_chirps()


def get_chirp(repo: ChirpRepository, chirp_id: int) -> Chirp:
    return repo.get_chirp(chirp_id)
