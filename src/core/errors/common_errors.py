"""Common error classes used across layers.

ValidationError covers every precondition failure on request fields
(missing values, wrong types, email outside the institutional domain,
unsupported purpose, short password).

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_EMAIL,
        message="Only @cs.udf.edu.br addresses are allowed",
        field="email",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
