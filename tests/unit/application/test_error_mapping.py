"""Unit tests for mapping PubGate errors onto HTTP responses."""

import pytest

from pubgate.application.api.v1.errors import map_error
from pubgate.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    InputError,
    InvalidStateError,
    NotFoundError,
    PubGateError,
    StorageUnavailableError,
    ValidationError,
)


class TestMapError:
    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFoundError("missing"), 404),
            (ValidationError("bad"), 422),
            (InputError("unresolvable"), 422),
            (InvalidStateError("wrong state"), 409),
            (ConflictError("already resolved", code="already_resolved"), 409),
            (AuthorizationError("nope", code="access_denied"), 403),
            (StorageUnavailableError("db down"), 503),
            (ConfigurationError("misconfigured"), 503),
            (PubGateError("???"), 500),
        ],
    )
    def test_status_codes(self, error, status):
        assert map_error(error).status_code == status

    @pytest.mark.parametrize("code", ["missing_token", "invalid_token", "token_expired"])
    def test_unauthenticated_is_401_with_challenge(self, code):
        exc = map_error(AuthorizationError("who?", code=code))

        assert exc.status_code == 401
        assert exc.headers == {"WWW-Authenticate": "Bearer"}

    def test_validation_field_in_detail(self):
        exc = map_error(ValidationError("A reason is required", field="notes"))

        assert exc.detail == {
            "code": "VALIDATION_ERROR",
            "message": "A reason is required",
            "field": "notes",
        }

    def test_code_defaults_to_class_name(self):
        exc = map_error(NotFoundError("Event not found"))

        assert exc.detail["code"] == "NotFoundError"
