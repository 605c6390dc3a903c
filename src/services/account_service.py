"""Account service — registration, login/logout and user counts.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

import bcrypt

from domain.model.errors import (
    DuplicateError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10

# bcrypt ignores everything past 72 bytes; newer releases reject longer input
_BCRYPT_MAX_BYTES = 72


def _is_encodable(value: str) -> bool:
    """False for strings holding lone surrogates, which JSON allows but UTF-8 does not."""
    try:
        value.encode("utf-8")
        return True
    except UnicodeEncodeError:
        return False


def _password_bytes(password: str) -> bytes:
    if not _is_encodable(password):
        raise ValidationError("Password contains invalid characters.")
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password with a freshly generated bcrypt salt.

    Raises:
        ValidationError: password is not valid UTF-8 text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    if not _is_encodable(plain):
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class AccountService:
    """Account lifecycle operations over an injected UserRepository."""

    def __init__(self, repo: UserRepository, bcrypt_rounds: int = BCRYPT_ROUNDS):
        self.repo = repo
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, user_name: str | None, email: str | None, password: str | None) -> User:
        """Register a new, offline user.

        Raises:
            ValidationError: a required field is missing or is not valid text
            DuplicateError: email (or user name) already registered
            StorageError: the store failed
        """
        if not user_name or not email or not password:
            raise ValidationError("userName, email and password are required.")
        if not _is_encodable(user_name) or not _is_encodable(email):
            raise ValidationError("userName and email must be valid text.")

        if self.repo.get_by_email(email):
            raise DuplicateError("Email already registered.")

        password_hash = hash_password(password, self.bcrypt_rounds)
        user = self.repo.create(user_name=user_name, email=email, password_hash=password_hash)
        logger.info("User registered", extra={"userId": user.id, "email": email})
        return user

    def login(self, email: str | None, password: str | None) -> User:
        """Verify credentials and mark the user online.

        Unknown email and wrong password raise the same error.

        Raises:
            InvalidCredentialsError: credentials missing or do not match
            StorageError: the store failed
        """
        if not email or not password or not _is_encodable(email):
            raise InvalidCredentialsError("Invalid credentials")

        user = self.repo.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")

        if not self.repo.set_online(user.id, True):
            raise InvalidCredentialsError("Invalid credentials")
        user.is_online = True

        logger.info("User logged in", extra={"userId": user.id, "email": email})
        return user

    def logout(self, email: str | None) -> User:
        """Mark the user with this email offline.

        Raises:
            ValidationError: email missing (storage is not touched)
            NotFoundError: no user with this email
            StorageError: the store failed
        """
        if not email:
            raise ValidationError("Email is required.")
        if not _is_encodable(email):
            raise NotFoundError("User not found.")

        user = self.repo.get_by_email(email)
        if not user or not self.repo.set_online(user.id, False):
            raise NotFoundError("User not found.")
        user.is_online = False

        logger.info("User logged out", extra={"userId": user.id, "email": email})
        return user

    def count_total(self) -> int:
        return self.repo.count()

    def count_online(self) -> int:
        return self.repo.count_online()
