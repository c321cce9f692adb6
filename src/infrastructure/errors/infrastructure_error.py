"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (token
stores, identity provider).

Architecture:
- Infrastructure catches client exceptions and maps them to DomainError
- Infrastructure errors inherit from DomainError (not Exception)
- Domain code is always INTERNAL_ERROR; InfrastructureErrorCode keeps the
  specific cause for logs
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode

INTERNAL_ERROR_MESSAGE = "Internal error. Try again later."


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (INTERNAL_ERROR).
        message: Client-safe message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context for logs (operation, original error).
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    message: str = INTERNAL_ERROR_MESSAGE
    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(InfrastructureError):
    """Token store errors.

    Wraps Firestore and Redis client exceptions.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderError(InfrastructureError):
    """Identity provider errors (Firebase Auth lookups and updates)."""

    pass
