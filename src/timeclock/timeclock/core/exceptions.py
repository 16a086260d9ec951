class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the admin password is invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class EvaluationError(DomainError):
    """Raised when a report cannot be computed (fatal, aborts the evaluation)."""


class EventFormatError(DomainError):
    """Raised when a stored event payload cannot be decoded."""
