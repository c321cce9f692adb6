"""One-time token commands (CQRS write operations).

Commands carry the raw request values. Field presence, type and format
are checked by the handlers so that every precondition failure is
reported with its own stable error code.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class IssueToken:
    """Issue a new one-time token for an institutional email.

    Attributes:
        email: Owner email (must match the institutional domain).
        purpose: "activation" (default) or "password_reset".

    Example:
        >>> command = IssueToken(email="aluno@cs.udf.edu.br")
        >>> result = await handler.handle(command)
        >>> # Returns Success(TokenRecord) or Failure(error)
    """

    email: Any
    purpose: Any = "activation"


@dataclass(frozen=True, kw_only=True)
class ValidateToken:
    """Check a token against its email, optionally spending it.

    Attributes:
        email: Email the token was issued for.
        token: 6-digit code.
        mark_as_used: Spend the token when validation succeeds.
    """

    email: Any
    token: Any
    mark_as_used: bool = False


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Spend a token to set a new password.

    Attributes:
        email: Account email.
        token: 6-digit code issued for that email.
        new_password: Plain-text new password (min length from settings).
    """

    email: Any
    token: Any
    new_password: Any
