"""Validate Token handler.

Checks a token against its email. With mark_as_used the token is spent
in the same atomic step, which is how the account activation flow
finishes.
"""

from src.application.commands.token_commands import ValidateToken
from src.application.dtos import ValidatedToken
from src.application.services import TokenLifecycleManager
from src.core.errors import DomainError
from src.core.result import Result


class ValidateTokenHandler:
    """Handler for ValidateToken command."""

    def __init__(self, manager: TokenLifecycleManager) -> None:
        self._manager = manager

    async def handle(self, cmd: ValidateToken) -> Result[ValidatedToken, DomainError]:
        """Handle ValidateToken command.

        Returns:
            Success(ValidatedToken), or Failure with the first failing check.
        """
        return await self._manager.validate(
            cmd.email,
            cmd.token,
            consume_on_success=bool(cmd.mark_as_used),
        )
