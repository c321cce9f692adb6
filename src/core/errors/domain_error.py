"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every error that flows through a
Result. It is data, not an Exception: handlers return Failure(error)
instead of raising.

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode, ErrorKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message, safe to show to clients.
        details: Optional context for logs. Never serialized to clients.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    @property
    def kind(self) -> ErrorKind:
        """Stable error kind derived from the code."""
        return self.code.kind

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
