"""Unit tests for OtpTokenService (6-digit code generation)."""

from unittest.mock import patch

import pytest

from src.core.constants import TOKEN_LENGTH, TOKEN_MAX_VALUE, TOKEN_MIN_VALUE
from src.infrastructure.security import OtpTokenService


@pytest.mark.unit
class TestOtpTokenService:
    def test_generates_six_digit_numeric_string(self):
        service = OtpTokenService()

        for _ in range(200):
            token = service.generate_token()
            assert len(token) == TOKEN_LENGTH
            assert token.isdigit()
            assert not token.startswith("0")

    @pytest.mark.parametrize(
        ("drawn", "expected"),
        [(0, "100000"), (899_999, "999999"), (382_913, "482913")],
    )
    def test_range_bounds(self, drawn, expected):
        with patch(
            "src.infrastructure.security.otp_token_service.secrets.randbelow",
            return_value=drawn,
        ) as randbelow:
            assert OtpTokenService().generate_token() == expected

        randbelow.assert_called_once_with(TOKEN_MAX_VALUE - TOKEN_MIN_VALUE + 1)
