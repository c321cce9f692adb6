"""Validation helpers for request preconditions.

All validation functions return Result types so callers can chain them
and stop at the first failure, which keeps error reporting deterministic.

Usage:
    from src.core.validation import validate_institutional_email

    match validate_institutional_email(email, "@cs.udf.edu.br"):
        case Success(value=email):
            ...
        case Failure(error=error):
            print(error.message)
"""

from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def validate_required(
    fields: dict[str, Any],
    *,
    code: ErrorCode = ErrorCode.MISSING_FIELDS,
) -> Result[dict[str, str], ValidationError]:
    """Validate that every field is present and a string.

    Empty strings count as missing, matching what the mobile client sends
    when a form field is left blank.

    Args:
        fields: Mapping of field name to received value.
        code: Error code reported when a field is missing.

    Returns:
        Success with the same mapping narrowed to str, or Failure naming the
        first offending field.
    """
    for name, value in fields.items():
        if value is None or value == "":
            return Failure(
                error=ValidationError(
                    code=code,
                    message=f"{_joined(fields)} are required"
                    if len(fields) > 1
                    else f"{name} is required",
                    field=name,
                )
            )
    for name, value in fields.items():
        if not isinstance(value, str):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_FIELD_TYPE,
                    message=f"{name} must be a string",
                    field=name,
                )
            )
    return Success(value=dict(fields))


def validate_institutional_email(
    email: str, domain: str
) -> Result[str, ValidationError]:
    """Validate that the email belongs to the institutional domain.

    Args:
        email: Email address to check.
        domain: Required suffix, including the "@" (e.g. "@cs.udf.edu.br").

    Returns:
        Success with the email, or Failure with INVALID_EMAIL.
    """
    local_part = email[: -len(domain)] if email.endswith(domain) else ""
    if not local_part or "@" in local_part:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message=f"Only {domain} addresses are allowed",
                field="email",
            )
        )
    return Success(value=email)


def validate_min_length(
    value: str,
    min_length: int,
    field_name: str,
    *,
    code: ErrorCode = ErrorCode.WEAK_PASSWORD,
) -> Result[str, ValidationError]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        field_name: Name of the field being validated.
        code: Error code reported on failure.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) < min_length:
        return Failure(
            error=ValidationError(
                code=code,
                message=f"{field_name} must be at least {min_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def _joined(fields: dict[str, Any]) -> str:
    names = list(fields)
    return ", ".join(names[:-1]) + f" and {names[-1]}"
