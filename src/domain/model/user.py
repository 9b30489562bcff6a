from dataclasses import dataclass


@dataclass
class User:
    """Domain model representing a user.

    ``password_hash`` is only populated on lookups that need it for
    credential checks; views returned from writes leave it unset.
    """
    id: int
    email: str
    password_hash: str | None = None

    def without_hash(self) -> "User":
        return User(id=self.id, email=self.email)
