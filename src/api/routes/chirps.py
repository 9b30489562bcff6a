"""Chirp routes.

Endpoints:
- POST /api/chirps: Create a chirp
- GET /api/chirps: List all chirps, oldest first
- GET /api/chirps/{chirp_id}: Get one chirp
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from api.config import AppConfig
from api.dependencies import get_chirp_repo, get_config
from api.models import ChirpRequest, ChirpResponse
from api.security import get_optional_user_id, unauthorized
from domain.model.chirp import Chirp
from domain.model.errors import NotFoundError, ValidationError
from port.chirp_repository import ChirpRepository
from services import chirp_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chirps", tags=["chirps"])


def _to_response(chirp: Chirp) -> ChirpResponse:
    return ChirpResponse(id=chirp.id, body=chirp.body)


@router.post("", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
def create_chirp(
    request: ChirpRequest,
    user_id: Optional[int] = Depends(get_optional_user_id),
    config: AppConfig = Depends(get_config),
    repo: ChirpRepository = Depends(get_chirp_repo),
):
    """Create a chirp. Requires a token only when CHIRPS_REQUIRE_AUTH is set."""
    if config.chirps_require_auth and user_id is None:
        raise unauthorized()

    try:
        chirp = chirp_service.submit_chirp(repo, request.body)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return _to_response(chirp)


@router.get("", response_model=list[ChirpResponse])
def list_chirps(repo: ChirpRepository = Depends(get_chirp_repo)):
    return [_to_response(c) for c in chirp_service.list_chirps(repo)]


@router.get("/{chirp_id}", response_model=ChirpResponse)
def get_chirp(chirp_id: int, repo: ChirpRepository = Depends(get_chirp_repo)):
    try:
        chirp = chirp_service.get_chirp(repo, chirp_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chirp doesn't exist")
    return _to_response(chirp)
