class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class BlockedDayError(ValidationError):
    """Raised when a status edit targets a day that is blocked for the user."""


class NotFoundError(DomainError):
    """Raised when a referenced user/category/holiday does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
