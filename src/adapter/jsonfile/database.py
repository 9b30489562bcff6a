"""JSON file implementation of UserRepository and ChirpRepository.

A single JsonDatabase owns both collections. Every operation runs under one
lock; mutations are applied to a copy of the snapshot, written to disk, and
only then swapped in, so a failed write changes nothing.
"""

import threading
from logging import getLogger
from pathlib import Path

from adapter.jsonfile.snapshot import ChirpRecord, Snapshot, UserRecord, read_snapshot, write_snapshot
from domain.model.chirp import MAX_CHIRP_LENGTH, Chirp, is_valid_body
from domain.model.errors import DuplicateError, NotFoundError, StorageError, ValidationError
from domain.model.identity import next_id
from domain.model.user import User

logger = getLogger(__name__)


class JsonDatabase:
    def __init__(self, path: Path, snapshot: Snapshot):
        self.path = path
        self._snapshot = snapshot
        self._lock = threading.Lock()

    @classmethod
    def open(cls, path: str | Path) -> "JsonDatabase":
        """Load the database at ``path``, creating an empty one if absent."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to create directory for {path}") from e

        snapshot = read_snapshot(path)
        if snapshot is None:
            snapshot = Snapshot()
            write_snapshot(path, snapshot)
            logger.info("Created new database", extra={"path": str(path)})
        else:
            logger.info("Loaded database", extra={
                "path": str(path),
                "users": len(snapshot.users),
                "chirps": len(snapshot.chirps),
            })
        return cls(path, snapshot)

    def _commit(self, updated: Snapshot) -> None:
        """Persist ``updated`` and make it the live state. Caller holds the lock."""
        write_snapshot(self.path, updated)
        self._snapshot = updated

    @staticmethod
    def _find_user(snapshot: Snapshot, email: str) -> UserRecord | None:
        for record in snapshot.users.values():
            if record.email == email:
                return record
        return None

    @staticmethod
    def _to_user(record: UserRecord, with_hash: bool = False) -> User:
        return User(
            id=record.id,
            email=record.email,
            password_hash=record.password_hash if with_hash else None,
        )

    @staticmethod
    def _to_chirp(record: ChirpRecord) -> Chirp:
        return Chirp(id=record.id, body=record.body)

    # ── users ────────────────────────────────────────────────

    def create_user(self, email: str, password_hash: str) -> User:
        with self._lock:
            if self._find_user(self._snapshot, email):
                raise DuplicateError("Email already registered")

            updated = self._snapshot.model_copy(deep=True)
            record = UserRecord(id=next_id(updated.users), email=email, password_hash=password_hash)
            updated.users[record.id] = record
            self._commit(updated)

        logger.info("User created", extra={"userId": record.id})
        return self._to_user(record)

    def user_exists(self, email: str) -> bool:
        with self._lock:
            return self._find_user(self._snapshot, email) is not None

    def get_user_by_email(self, email: str) -> User:
        with self._lock:
            record = self._find_user(self._snapshot, email)
        if record is None:
            raise NotFoundError("User not found")
        return self._to_user(record, with_hash=True)

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock:
            record = self._snapshot.users.get(user_id)
        if record is None:
            raise NotFoundError(f"User {user_id} not found")
        return self._to_user(record, with_hash=True)

    def update_user(self, user_id: int, email: str, password_hash: str) -> User:
        with self._lock:
            if user_id not in self._snapshot.users:
                raise NotFoundError(f"User {user_id} not found")
            owner = self._find_user(self._snapshot, email)
            if owner is not None and owner.id != user_id:
                raise DuplicateError("Email already registered")

            updated = self._snapshot.model_copy(deep=True)
            record = UserRecord(id=user_id, email=email, password_hash=password_hash)
            updated.users[user_id] = record
            self._commit(updated)

        logger.info("User updated", extra={"userId": user_id})
        return self._to_user(record)

    def count_users(self) -> int:
        with self._lock:
            return len(self._snapshot.users)

    # ── chirps ───────────────────────────────────────────────

    def create_chirp(self, body: str) -> Chirp:
        if not is_valid_body(body):
            raise ValidationError(f"Chirp body exceeds {MAX_CHIRP_LENGTH} characters")

        with self._lock:
            updated = self._snapshot.model_copy(deep=True)
            record = ChirpRecord(id=next_id(updated.chirps), body=body)
            updated.chirps[record.id] = record
            self._commit(updated)

        logger.info("Chirp created", extra={"chirpId": record.id})
        return self._to_chirp(record)

    def list_chirps(self) -> list[Chirp]:
        with self._lock:
            records = sorted(self._snapshot.chirps.values(), key=lambda r: r.id)
        return [self._to_chirp(r) for r in records]

    def get_chirp(self, chirp_id: int) -> Chirp:
        with self._lock:
            record = self._snapshot.chirps.get(chirp_id)
        if record is None:
            raise NotFoundError(f"Chirp {chirp_id} not found")
        return self._to_chirp(record)

    def count_chirps(self) -> int:
        with self._lock:
            return len(self._snapshot.chirps)
