"""Unit tests for request precondition helpers."""

import pytest

from src.core.enums import ErrorCode, ErrorKind
from src.core.result import Failure, Success
from src.core.validation import (
    validate_institutional_email,
    validate_min_length,
    validate_required,
)
from tests.conftest import EMAIL_DOMAIN


@pytest.mark.unit
class TestValidateRequired:
    def test_all_present(self):
        result = validate_required({"email": "a@cs.udf.edu.br", "token": "482913"})

        assert result == Success(value={"email": "a@cs.udf.edu.br", "token": "482913"})

    @pytest.mark.parametrize("missing", [None, ""])
    def test_missing_value_uses_given_code(self, missing):
        result = validate_required({"email": missing}, code=ErrorCode.MISSING_EMAIL)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MISSING_EMAIL
        assert result.error.field == "email"
        assert result.error.kind == ErrorKind.INVALID_ARGUMENT

    def test_missing_reported_before_wrong_type(self):
        result = validate_required({"email": 123, "token": None})

        assert result.error.code == ErrorCode.MISSING_FIELDS
        assert result.error.field == "token"

    def test_non_string_value(self):
        result = validate_required({"email": "a@cs.udf.edu.br", "token": 482913})

        assert result.error.code == ErrorCode.INVALID_FIELD_TYPE
        assert result.error.field == "token"


@pytest.mark.unit
class TestValidateInstitutionalEmail:
    @pytest.mark.parametrize(
        "email",
        ["aluno@cs.udf.edu.br", "joao.silva@cs.udf.edu.br", "a@cs.udf.edu.br"],
    )
    def test_accepts_institutional_addresses(self, email):
        assert validate_institutional_email(email, EMAIL_DOMAIN) == Success(value=email)

    @pytest.mark.parametrize(
        "email",
        [
            "aluno@gmail.com",
            "@cs.udf.edu.br",
            "aluno@cs.udf.edu.br.evil.com",
            "a@b@cs.udf.edu.br",
            "aluno@udf.edu.br",
        ],
    )
    def test_rejects_other_addresses(self, email):
        result = validate_institutional_email(email, EMAIL_DOMAIN)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_EMAIL


@pytest.mark.unit
class TestValidateMinLength:
    def test_exact_minimum_passes(self):
        assert validate_min_length("12345678", 8, "newPassword") == Success(
            value="12345678"
        )

    def test_short_value_is_weak_password(self):
        result = validate_min_length("1234567", 8, "newPassword")

        assert result.error.code == ErrorCode.WEAK_PASSWORD
        assert "8" in result.error.message
