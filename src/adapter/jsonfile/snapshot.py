"""On-disk snapshot format and atomic file I/O."""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from domain.model.errors import StorageError

logger = logging.getLogger(__name__)


class UserRecord(BaseModel):
    id: int
    email: str
    password_hash: str


class ChirpRecord(BaseModel):
    id: int
    body: str


class Snapshot(BaseModel):
    """Complete state of the database, keyed by id in each collection."""
    users: dict[int, UserRecord] = Field(default_factory=dict)
    chirps: dict[int, ChirpRecord] = Field(default_factory=dict)


def read_snapshot(path: Path) -> Snapshot | None:
    """Load the snapshot at ``path``. Returns None if the file does not exist."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StorageError(f"Failed to read {path}") from e

    if not raw.strip():
        return Snapshot()

    try:
        return Snapshot.model_validate_json(raw)
    except PydanticValidationError as e:
        raise StorageError(f"Corrupt snapshot at {path}") from e


def write_snapshot(path: Path, snapshot: Snapshot) -> None:
    """Atomically replace ``path`` with ``snapshot``.

    The data goes to a temporary file in the same directory which is then
    renamed over the target, so readers never see a truncated file.
    """
    data = snapshot.model_dump_json(indent=2).encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise StorageError(f"Failed to write {path}") from e

    logger.debug("Snapshot written", extra={"path": str(path), "bytes": len(data)})
