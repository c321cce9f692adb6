"""Token lifecycle domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import TokenError

    match await manager.validate(email, token):
        case Failure(error=TokenError(code=ErrorCode.TOKEN_EXPIRED)):
            ...
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Failure tied to a token's state (unknown, mismatched, used, expired).

    Attributes:
        code: ErrorCode enum (TOKEN_*).
        message: Human-readable message.
        details: Additional context for logs.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityError(DomainError):
    """Failure reported while applying a change to the user's identity.

    Attributes:
        code: USER_NOT_FOUND or INTERNAL_ERROR.
        message: Human-readable message.
        details: Additional context for logs.
    """


TOKEN_NOT_FOUND_MESSAGE = "Invalid or unknown token"
TOKEN_MISMATCH_MESSAGE = "Token does not match the given email"
TOKEN_USED_MESSAGE = "Token has already been used"
TOKEN_EXPIRED_MESSAGE = "Token expired. Request a new code."
TOKEN_SPACE_EXHAUSTED_MESSAGE = "Could not generate a unique token. Try again."
USER_NOT_FOUND_MESSAGE = "No user found with this email"


def token_error(code: ErrorCode, **details: str) -> TokenError:
    """Build a TokenError with the standard message for its code.

    Args:
        code: One of the TOKEN_* codes.
        **details: Log context.

    Returns:
        TokenError with a client-safe message.
    """
    messages = {
        ErrorCode.TOKEN_NOT_FOUND: TOKEN_NOT_FOUND_MESSAGE,
        ErrorCode.TOKEN_MISMATCH: TOKEN_MISMATCH_MESSAGE,
        ErrorCode.TOKEN_USED: TOKEN_USED_MESSAGE,
        ErrorCode.TOKEN_EXPIRED: TOKEN_EXPIRED_MESSAGE,
        ErrorCode.TOKEN_SPACE_EXHAUSTED: TOKEN_SPACE_EXHAUSTED_MESSAGE,
    }
    return TokenError(
        code=code,
        message=messages.get(code, "Token operation failed"),
        details=details or None,
    )
