"""Domain-level error codes (machine-readable).

Codes are stable strings returned to clients next to their ErrorKind.
The values match the error identifiers the mobile app already handles.

Categories:
- Input validation (MISSING_*, INVALID_*, WEAK_PASSWORD)
- Token lifecycle (TOKEN_*)
- Identity (USER_NOT_FOUND)
- Capacity (TOKEN_SPACE_EXHAUSTED)
- Infrastructure (INTERNAL_ERROR)
"""

from enum import Enum

from src.core.enums.error_kind import ErrorKind


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    MISSING_EMAIL = "missing_email"
    MISSING_FIELDS = "missing_fields"
    INVALID_FIELD_TYPE = "invalid_field_type"
    INVALID_EMAIL = "invalid_email"
    INVALID_PURPOSE = "invalid_purpose"
    WEAK_PASSWORD = "weak_password"

    # Token lifecycle errors
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_MISMATCH = "token_mismatch"
    TOKEN_USED = "token_used"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_SPACE_EXHAUSTED = "token_space_exhausted"

    # Identity errors
    USER_NOT_FOUND = "user_not_found"

    # Infrastructure errors
    INTERNAL_ERROR = "internal_error"

    @property
    def kind(self) -> ErrorKind:
        """Kind this code is reported under."""
        return _KIND_BY_CODE[self]


_KIND_BY_CODE: dict[ErrorCode, ErrorKind] = {
    ErrorCode.MISSING_EMAIL: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.MISSING_FIELDS: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.INVALID_FIELD_TYPE: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.INVALID_EMAIL: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.INVALID_PURPOSE: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.WEAK_PASSWORD: ErrorKind.INVALID_ARGUMENT,
    ErrorCode.TOKEN_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.TOKEN_MISMATCH: ErrorKind.PERMISSION_DENIED,
    ErrorCode.TOKEN_USED: ErrorKind.PERMISSION_DENIED,
    ErrorCode.TOKEN_EXPIRED: ErrorKind.DEADLINE_EXCEEDED,
    ErrorCode.TOKEN_SPACE_EXHAUSTED: ErrorKind.RESOURCE_EXHAUSTED,
    ErrorCode.USER_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.INTERNAL_ERROR: ErrorKind.INTERNAL,
}
