"""Unit tests for StubEmailService."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from src.domain.enums import TokenPurpose
from src.infrastructure.email import StubEmailService
from tests.conftest import START_TIME, STUDENT_EMAIL


@pytest.mark.unit
class TestStubEmailService:
    async def test_logs_delivery_without_token(self):
        logger = MagicMock()
        service = StubEmailService(logger)

        await service.send_token_email(
            to_email=STUDENT_EMAIL,
            token="482913",
            purpose=TokenPurpose.PASSWORD_RESET,
            expires_at=START_TIME + timedelta(minutes=30),
        )

        logger.info.assert_called_once()
        event, = logger.info.call_args.args
        context = logger.info.call_args.kwargs
        assert event == "token_email_stubbed"
        assert context["to_email"] == STUDENT_EMAIL
        assert context["purpose"] == "password_reset"
        assert "482913" not in repr(logger.info.call_args)
