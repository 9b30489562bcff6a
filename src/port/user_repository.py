from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create_user(self, email: str, password_hash: str) -> User:
        """Create a new user. Raise DuplicateError if the email is taken."""
        ...

    def user_exists(self, email: str) -> bool:
        """Return True if a user with this email exists."""
        ...

    def get_user_by_email(self, email: str) -> User:
        """Find a user by email, hash included. Raise NotFoundError if missing."""
        ...

    def get_user_by_id(self, user_id: int) -> User:
        """Find a user by ID. Raise NotFoundError if missing."""
        ...

    def update_user(self, user_id: int, email: str, password_hash: str) -> User:
        """Replace email and hash in place. Raise NotFoundError or DuplicateError."""
        ...
