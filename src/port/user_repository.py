from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations raise DuplicateError when a unique field collides and
    StorageError when the underlying store fails.
    """
    def create(self, user_name: str, email: str, password_hash: str) -> User:
        """Persist a new offline user and return it with its assigned id."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def set_online(self, user_id: str, is_online: bool) -> bool:
        """Set the online flag. Return False if no user matched."""
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...

    def count_online(self) -> int:
        """Return the number of users currently flagged online."""
        ...
