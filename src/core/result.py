"""Result types for railway-oriented programming.

Token operations can fail in many expected ways (unknown token, wrong
email, expired code). Those failures travel as values instead of
exceptions so every caller has to handle them explicitly.

Usage:
    async def lookup(token: str) -> Result[TokenRecord, TokenError]:
        record = await store.get(token)
        if record is None:
            return Failure(error=TokenError(code=ErrorCode.TOKEN_NOT_FOUND, ...))
        return Success(value=record)

    match await lookup("123456"):
        case Success(value=record):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
