from fastapi import HTTPException, Request

from adapter.jsonfile.database import JsonDatabase
from api.config import AppConfig
from api.metrics import ServerMetrics
from port.chirp_repository import ChirpRepository
from port.user_repository import UserRepository
from services.session_service import SessionIssuer


def _get_db(request: Request) -> JsonDatabase:
    """Get the database opened at startup, raising 503 if unavailable."""
    db = getattr(request.app.state, "database", None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return db


def get_user_repo(request: Request) -> UserRepository:
    return _get_db(request)


def get_chirp_repo(request: Request) -> ChirpRepository:
    return _get_db(request)


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.session_issuer


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_metrics(request: Request) -> ServerMetrics:
    return request.app.state.metrics
