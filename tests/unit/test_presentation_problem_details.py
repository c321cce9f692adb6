"""Unit tests for the RFC 9457 ProblemDetails schema."""

import pytest

from src.presentation.routers.api.v1.errors import ErrorDetail, ProblemDetails


def _problem(**overrides) -> ProblemDetails:
    fields = {
        "type": "http://localhost:3000/errors/token_used",
        "title": "Token Already Used",
        "status": 403,
        "detail": "Token has already been used",
        "instance": "/api/v1/token-validations",
        "kind": "permission_denied",
        "code": "token_used",
    } | overrides
    return ProblemDetails(**fields)


@pytest.mark.unit
class TestProblemDetails:
    def test_success_defaults_to_false(self):
        assert _problem().success is False

    def test_optional_members_dropped_when_unset(self):
        dumped = _problem().model_dump(exclude_none=True)

        assert "errors" not in dumped
        assert "trace_id" not in dumped
        assert dumped["success"] is False

    def test_errors_serialized(self):
        problem = _problem(
            errors=[ErrorDetail(field="email", code="invalid_email", message="x")]
        )

        assert problem.model_dump()["errors"] == [
            {"field": "email", "code": "invalid_email", "message": "x"}
        ]
