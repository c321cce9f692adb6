"""Command handlers for the one-time token workflows."""

from src.application.commands.handlers.issue_token_handler import IssueTokenHandler
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.validate_token_handler import (
    ValidateTokenHandler,
)

__all__ = ["IssueTokenHandler", "ResetPasswordHandler", "ValidateTokenHandler"]
