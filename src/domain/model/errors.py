"""Domain-level exceptions.

Services and stores raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class UnauthorizedError(DomainError):
    """Credentials or session token were rejected.

    The message is deliberately generic so callers cannot tell which check failed.
    """


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class ChirpTooLongError(ValidationError):
    """Chirp body exceeds the maximum length."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__("Chirp is too long")


class StorageError(DomainError):
    """Reading or writing the durable snapshot failed."""


class HashingError(DomainError):
    """The password hashing primitive failed."""
