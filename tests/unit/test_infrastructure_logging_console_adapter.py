"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward the event name and context
- error() flattens exception details
- bind() returns a new adapter and leaves the original untouched
- Renderer selection and password redaction

Architecture:
- Unit tests with mocked structlog for delegation
- Real structlog pipeline (capture_logs) for processors
"""

from unittest.mock import MagicMock, patch

import pytest

from src.infrastructure.logging import console_adapter
from src.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "src.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("token_issued", email="aluno@cs.udf.edu.br")

            getattr(mock_logger, level).assert_called_once_with(
                "token_issued", email="aluno@cs.udf.edu.br"
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("unhandled_exception", error=ValueError("bad"), path="/x")

            mock_logger.error.assert_called_once_with(
                "unhandled_exception",
                path="/x",
                error_type="ValueError",
                error_message="bad",
            )

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(trace_id="abc")
            bound.info("token_validated")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(trace_id="abc")
            mock_logger.bind.return_value.info.assert_called_once_with(
                "token_validated"
            )
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    def test_json_renderer_in_non_development(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value

    def test_console_renderer_in_development(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=False)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value

    def test_passwords_are_redacted(self):
        event = console_adapter._redact_secrets(
            None, "info", {"event": "x", "newPassword": "n3w-passw0rd", "email": "a"}
        )

        assert event == {"event": "x", "newPassword": "[REDACTED]", "email": "a"}
