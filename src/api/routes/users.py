"""User routes (register, update profile)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_session_issuer, get_user_repo
from api.models import UserRequest, UserResponse
from api.security import get_bearer_token, unauthorized
from domain.model.errors import DuplicateError, NotFoundError, UnauthorizedError, ValidationError
from port.user_repository import UserRepository
from services import auth_service
from services.session_service import SessionIssuer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: UserRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user.

    Raises:
        HTTPException: 409 if the email is taken, 400 if the password is rejected
    """
    try:
        user = auth_service.register(repo, request.email, request.password)
    except DuplicateError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User email already used")
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return UserResponse(id=user.id, email=user.email)


@router.put("", response_model=UserResponse)
def update_user(
    request: UserRequest,
    token: str = Depends(get_bearer_token),
    repo: UserRepository = Depends(get_user_repo),
    issuer: SessionIssuer = Depends(get_session_issuer),
):
    """Change the email and password of the authenticated user."""
    try:
        user = auth_service.update_profile(repo, issuer, token, request.email, request.password)
    except UnauthorizedError:
        raise unauthorized()
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except DuplicateError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User email already used")
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return UserResponse(id=user.id, email=user.email)
