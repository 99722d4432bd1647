class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an entity, or an entity in the required state, does not exist."""


class ConflictError(DomainError):
    """Raised when a write collides with existing state (card in use, duplicate number or name)."""


class AlreadyRespondedError(DomainError):
    """Raised when an approval request has already been answered."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when the logged-in user lacks the required role."""
