class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgument(ValidationError):
    """Raised when a month key is malformed or out of range."""


class MalformedDate(ValidationError):
    """Raised when an ISO or compact date string cannot be parsed."""
