"""Auth service — registration, login and profile updates.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import DuplicateError, NotFoundError, UnauthorizedError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services.credentials import MAX_PASSWORD_BYTES, hash_password, verify_password
from services.session_service import SessionIssuer

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass(frozen=True)
class LoginResult:
    user: User
    token: str


def _validate_password(password: str) -> None:
    if not password:
        raise ValidationError("Password must not be empty")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def register(repo: UserRepository, email: str, password: str) -> User:
    """Register a new user.

    Returns the created User without its password hash.

    Raises:
        DuplicateError: email already registered
        ValidationError: password is empty or too long
    """
    if repo.user_exists(email):
        raise DuplicateError("Email already registered")

    _validate_password(password)
    user = repo.create_user(email=email, password_hash=hash_password(password))
    logger.info("User registered", extra={"userId": user.id})
    return user


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Check email and password.

    Doesn't reveal whether the email exists.

    Raises:
        UnauthorizedError: invalid credentials (deliberately vague)
    """
    try:
        user = repo.get_user_by_email(email)
    except NotFoundError:
        raise UnauthorizedError(INVALID_CREDENTIALS) from None

    if not user.password_hash or not verify_password(password, user.password_hash):
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user.without_hash()


def login(
    repo: UserRepository,
    issuer: SessionIssuer,
    email: str,
    password: str,
    ttl_seconds: int | None = None,
) -> LoginResult:
    user = authenticate(repo, email, password)
    token = issuer.issue(user.id, ttl_seconds)
    logger.info("User logged in", extra={"userId": user.id})
    return LoginResult(user=user, token=token)


def update_profile(
    repo: UserRepository,
    issuer: SessionIssuer,
    token: str,
    email: str,
    password: str,
) -> User:
    """Replace the email and password of the user the token belongs to.

    Raises:
        UnauthorizedError: token rejected
        NotFoundError: token subject no longer exists
        DuplicateError: email belongs to another user
        ValidationError: password is empty or too long
    """
    user_id = issuer.validate(token)
    _validate_password(password)
    user = repo.update_user(user_id, email=email, password_hash=hash_password(password))
    logger.info("User profile updated", extra={"userId": user_id})
    return user
