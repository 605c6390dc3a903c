"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input is missing a required field."""


class InvalidCredentialsError(DomainError):
    """Unknown email or wrong password."""


class StorageError(DomainError):
    """The document store failed or is unreachable."""
