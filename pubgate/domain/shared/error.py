"""Error hierarchy for pubgate.

Error layers:
- PubGateError: Base class for all pubgate errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like storage/network issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class PubGateError(Exception):
    """Base class for all pubgate errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(PubGateError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class InputError(DomainError):
    """Input could not be resolved to something the rule engine can evaluate."""


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or was changed concurrently."""


class AuthorizationError(DomainError):
    """User not authenticated or not authorized for this operation.

    Unauthenticated callers carry code ``missing_token``, ``invalid_token``
    or ``token_expired``.
    """


AuthError = AuthorizationError


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(PubGateError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
