"""In-memory implementation of UserRepository for testing."""

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.identity import next_id
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[int, User] = {}

    # ── write operations ─────────────────────────────────────

    def create_user(self, email: str, password_hash: str) -> User:
        if self.user_exists(email):
            raise DuplicateError("Email already registered")

        user = User(id=next_id(self.store), email=email, password_hash=password_hash)
        self.store[user.id] = user
        return user.without_hash()

    def update_user(self, user_id: int, email: str, password_hash: str) -> User:
        user = self.store.get(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        if any(u.email == email and u.id != user_id for u in self.store.values()):
            raise DuplicateError("Email already registered")

        user.email = email
        user.password_hash = password_hash
        return user.without_hash()

    # ── read operations ──────────────────────────────────────

    def user_exists(self, email: str) -> bool:
        return any(u.email == email for u in self.store.values())

    def get_user_by_email(self, email: str) -> User:
        for user in self.store.values():
            if user.email == email:
                return User(id=user.id, email=user.email, password_hash=user.password_hash)
        raise NotFoundError("User not found")

    def get_user_by_id(self, user_id: int) -> User:
        user = self.store.get(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return User(id=user.id, email=user.email, password_hash=user.password_hash)
