"""Authentication routes (login)."""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_session_issuer, get_user_repo
from api.models import LoginRequest, LoginResponse
from api.security import unauthorized
from domain.model.errors import UnauthorizedError
from port.user_repository import UserRepository
from services import auth_service
from services.session_service import SessionIssuer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    issuer: SessionIssuer = Depends(get_session_issuer),
):
    """Check credentials and return a session token.

    Raises:
        HTTPException: 401 if credentials are invalid
    """
    try:
        result = auth_service.login(
            repo, issuer, request.email, request.password, request.expires_in_seconds
        )
    except UnauthorizedError as e:
        raise unauthorized(str(e))

    return LoginResponse(id=result.user.id, email=result.user.email, token=result.token)
