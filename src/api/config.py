"""Application configuration read from the environment."""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings. Built once at startup, read-only afterwards."""
    jwt_secret: str
    database_path: str = "database.json"
    static_dir: str = "static"
    chirps_require_auth: bool = False
    port: int = 8080
    debug: bool = False

    @classmethod
    def from_env(cls) -> "AppConfig":
        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            raise ValueError(
                "JWT_SECRET environment variable is required. "
                "Generate a secure key with: openssl rand -base64 64"
            )
        return cls(
            jwt_secret=jwt_secret,
            database_path=os.getenv("DATABASE_PATH", "database.json"),
            static_dir=os.getenv("STATIC_DIR", "static"),
            chirps_require_auth=_env_flag("CHIRPS_REQUIRE_AUTH"),
            port=int(os.getenv("PORT", 8080)),
            debug=_env_flag("DEBUG"),
        )
