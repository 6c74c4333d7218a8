"""
Unit tests for results and failure kinds.
"""

import dataclasses

import pytest

from signed_rest import (
    ERROR_KINDS,
    BadGateway,
    BadRequest,
    Failure,
    Forbidden,
    InternalServerError,
    NotFound,
    RestError,
    ServiceUnavailable,
    Success,
    Timeout,
    Unauthorized,
    Unknown,
    error_for_status,
)


class TestErrorForStatus:
    """Test status code to failure kind mapping."""

    @pytest.mark.parametrize("status_code,expected", [
        (400, BadRequest("bad body")),
        (401, Unauthorized()),
        (403, Forbidden()),
        (404, NotFound()),
        (500, InternalServerError()),
        (502, BadGateway()),
        (503, ServiceUnavailable()),
        (504, Timeout()),
        (418, Unknown(418, "bad body")),
    ])
    def test_mapping(self, status_code, expected):
        """Test each status code maps to its kind."""
        assert error_for_status(status_code, "bad body") == expected

    def test_bad_request_keeps_body(self):
        """Test BadRequest carries the raw body text."""
        error = error_for_status(400, '{"field":"name"}')

        assert error.message == '{"field":"name"}'

    def test_unknown_message(self):
        """Test Unknown includes code and body in its message."""
        error = error_for_status(429, "slow down")

        assert error == Unknown(429, "slow down")
        assert str(error) == "Unknown error: Code 429, Message: slow down"

    def test_kinds_are_closed_and_immutable(self):
        """Test every kind is a frozen RestError."""
        assert len(ERROR_KINDS) == 11
        for kind in ERROR_KINDS:
            assert issubclass(kind, RestError)

        with pytest.raises(dataclasses.FrozenInstanceError):
            BadRequest("x").error_message = "y"


class TestResult:
    """Test the two result variants."""

    def test_success(self):
        result = Success({"name": "Ann"})
        assert result.ok is True
        assert result.value == {"name": "Ann"}

    def test_failure(self):
        result = Failure(NotFound())
        assert result.ok is False
        assert result == Failure(NotFound())
        assert result.error.message == "Resource not found"
