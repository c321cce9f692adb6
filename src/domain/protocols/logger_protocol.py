"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: a snake_case event name plus
key-value context.

Security:
    - NEVER log token values or passwords
    - Emails may be logged; they identify the request owner

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("token_issued", email=email, purpose=purpose.value)

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("token_email_failed", email=email)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is left unchanged.

        Args:
            **context: Context included in every subsequent log call.

        Returns:
            New logger instance with bound context.
        """
        ...
