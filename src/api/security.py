"""Bearer token dependencies."""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_session_issuer
from domain.model.errors import UnauthorizedError
from services.session_service import SessionIssuer

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """Raw token from the Authorization header (scheme stripped). Raises 401 if absent."""
    if not credentials:
        raise unauthorized("Not authenticated")
    return credentials.credentials


def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    issuer: SessionIssuer = Depends(get_session_issuer),
) -> Optional[int]:
    """Authenticated user id, or None when no valid token was sent."""
    if not credentials:
        return None
    try:
        return issuer.validate(credentials.credentials)
    except UnauthorizedError:
        return None
