class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record id does not exist in the store."""


class StorageError(DomainError):
    """Raised when the key-value store cannot be read or written."""
