"""FastAPI application entry point."""

import argparse
import os
import sys
import logging
import tomllib
from importlib.metadata import PackageNotFoundError, version
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.routing import Mount
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src to path
# main.py is at <root>/src/api/main.py, src is 2 levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from adapter.jsonfile.database import JsonDatabase
from api.config import AppConfig
from api.metrics import ServerMetrics
from api.routes import admin, auth, chirps, health, users
from domain.model.errors import HashingError, StorageError
from services.session_service import SessionIssuer
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

_project_root = _src_path.parent


def read_version() -> str:
    """Installed package version, or pyproject.toml in a source checkout."""
    try:
        return version("chirpy")
    except PackageNotFoundError:
        with open(_project_root / "pyproject.toml", "rb") as f:
            return tomllib.load(f)["project"]["version"]


VERSION = read_version()

SERVICE_NAME = "Chirpy API"


def mount_static(app: FastAPI, directory: str) -> None:
    """Serve `directory` under /app, replacing any mount from an earlier startup."""
    app.router.routes[:] = [
        r for r in app.router.routes if not (isinstance(r, Mount) and r.name == "app")
    ]
    app.mount("/app", StaticFiles(directory=directory, check_dir=False), name="app")


def _reset_database(path: str) -> None:
    try:
        os.remove(path)
        logger.warning("Debug mode: removed database", extra={"path": path})
    except FileNotFoundError:
        pass


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the database and build the session issuer."""
    config = AppConfig.from_env()
    if config.debug:
        _reset_database(config.database_path)

    app.state.config = config
    app.state.database = JsonDatabase.open(config.database_path)
    app.state.session_issuer = SessionIssuer(config.jwt_secret)
    mount_static(app, config.static_dir)

    logger.info("Server started", extra={
        "databasePath": config.database_path,
        "staticDir": config.static_dir,
        "chirpsRequireAuth": config.chirps_require_auth,
    })
    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Short posts, user accounts and session tokens",
    version=VERSION,
    lifespan=lifespan,
)
app.state.metrics = ServerMetrics()


@app.middleware("http")
async def log_and_count_requests(request: Request, call_next):
    """Log every request and count file server hits."""
    logger.info("Request", extra={"method": request.method, "path": request.url.path})
    if request.url.path == "/app" or request.url.path.startswith("/app/"):
        request.app.state.metrics.record_hit()
    return await call_next(request)


@app.exception_handler(StorageError)
@app.exception_handler(HashingError)
async def internal_error_handler(request: Request, exc: Exception):
    """Internal faults are logged in full and reported without detail."""
    logger.error(
        "Internal error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"detail": "Something went wrong"})


# Register routes
app.include_router(health.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(chirps.router)
app.include_router(admin.router)


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    parser = argparse.ArgumentParser(description=SERVICE_NAME)
    parser.add_argument("--debug", action="store_true", help="Delete the database on startup")
    args = parser.parse_args(argv)
    if args.debug:
        os.environ["DEBUG"] = "1"

    # Fail fast on missing settings before binding the port
    config = AppConfig.from_env()
    uvicorn.run(app, host="0.0.0.0", port=config.port, access_log=False)


if __name__ == "__main__":
    main()
