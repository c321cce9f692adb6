"""Domain errors package.

Usage:
    from src.domain.errors import TokenError, IdentityError
"""

from src.domain.errors.token_error import (
    USER_NOT_FOUND_MESSAGE,
    IdentityError,
    TokenError,
    token_error,
)

__all__ = ["USER_NOT_FOUND_MESSAGE", "IdentityError", "TokenError", "token_error"]
