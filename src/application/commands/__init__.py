"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (IssueToken, ResetPassword).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.token_commands import (
    IssueToken,
    ResetPassword,
    ValidateToken,
)

__all__ = [
    "IssueToken",
    "ResetPassword",
    "ValidateToken",
]
