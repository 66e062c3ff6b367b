class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateRecordError(ValidationError):
    """Raised when an append-only insert reuses an existing id."""


class NotFoundError(DomainError):
    """Raised when a looked-up record does not exist.

    Deletes never raise this: removing an absent record is a no-op.
    """


class AuthenticationError(DomainError):
    """Raised when no acting volunteer is attached to the request."""


class StoreUnavailableError(DomainError):
    """Raised when the underlying persistence cannot be reached."""
