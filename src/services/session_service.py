"""Session tokens — signed, expiring JWTs that identify a user.

Tokens are stateless: validity depends only on the signing secret and the
current time. There is no revocation list.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from jose import JWTError, jwt

from domain.model.errors import UnauthorizedError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_ISSUER = "chirpy"
MAX_TTL_SECONDS = 24 * 60 * 60


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionIssuer:
    """Issues and validates session tokens with a process-wide secret."""

    def __init__(
        self,
        secret: str,
        issuer: str = JWT_ISSUER,
        clock: Callable[[], datetime] = utc_now,
    ):
        if not secret:
            raise ValueError("Signing secret must not be empty")
        self._secret = secret
        self._issuer = issuer
        self._clock = clock

    @staticmethod
    def resolve_ttl(ttl_seconds: int | None) -> int:
        """Clamp a requested lifetime to (0, MAX_TTL_SECONDS].

        None or a non-positive value means the default, which is the maximum.
        """
        if not ttl_seconds or ttl_seconds <= 0:
            return MAX_TTL_SECONDS
        return min(ttl_seconds, MAX_TTL_SECONDS)

    def issue(self, user_id: int, ttl_seconds: int | None = None) -> str:
        """Create a signed token for ``user_id``."""
        ttl = self.resolve_ttl(ttl_seconds)
        issued_at = int(self._clock().timestamp())
        payload = {
            "iss": self._issuer,
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + ttl,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        logger.debug("Token issued", extra={"userId": user_id, "ttlSeconds": ttl})
        return token

    def validate(self, token: str) -> int:
        """Verify ``token`` and return its user id.

        Raises:
            UnauthorizedError: for any failure, without saying which
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                issuer=self._issuer,
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.debug("JWT verification failed", extra={"reason": type(e).__name__})
            raise UnauthorizedError("Invalid token") from e

        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise UnauthorizedError("Invalid token")

        now = self._clock().timestamp()
        if not issued_at <= now < expires_at:
            logger.debug("Token outside validity window", extra={"iat": issued_at, "exp": expires_at})
            raise UnauthorizedError("Invalid token")

        try:
            return int(payload.get("sub"))
        except (TypeError, ValueError) as e:
            raise UnauthorizedError("Invalid token") from e
