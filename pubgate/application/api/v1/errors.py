"""Centralized error transformation for API routes.

Maps PubGate errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from pubgate.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InputError,
    InvalidStateError,
    NotFoundError,
    PubGateError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    InputError: 422,
    InvalidStateError: 409,
    ConflictError: 409,
    AuthorizationError: 403,
}

# AuthorizationError codes meaning "who are you?" rather than "not allowed"
UNAUTHENTICATED_CODES = frozenset({"missing_token", "invalid_token", "token_expired"})


def map_error(error: PubGateError) -> HTTPException:
    """Map a PubGate error to an HTTPException."""
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        if isinstance(error, AuthorizationError) and error.code in UNAUTHENTICATED_CODES:
            return HTTPException(
                status_code=401,
                detail=detail,
                headers={"WWW-Authenticate": "Bearer"},
            )
        return HTTPException(
            status_code=DOMAIN_ERROR_STATUS_MAP.get(type(error), 400),
            detail=detail,
        )

    # Unknown PubGateError subclass
    return HTTPException(status_code=500, detail=detail)
