"""Issue Token handler.

Flow:
1. Delegate issuance to TokenLifecycleManager (validation + unique create)
2. Hand the code to the email notifier, if one is configured
3. Return Success(TokenRecord)

Email delivery is best effort. The token is already stored, so a
delivery failure is logged and the request still succeeds.

Architecture:
- Application layer ONLY imports from domain layer and application services
- NO infrastructure imports (collaborators are injected via protocols)
"""

from src.application.commands.token_commands import IssueToken
from src.application.services import TokenLifecycleManager
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import TokenRecord
from src.domain.protocols import EmailProtocol, LoggerProtocol


class IssueTokenHandler:
    """Handler for IssueToken command."""

    def __init__(
        self,
        manager: TokenLifecycleManager,
        logger: LoggerProtocol,
        email_service: EmailProtocol | None = None,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            manager: Token lifecycle manager.
            logger: Structured logger.
            email_service: Optional notifier that delivers the code.
        """
        self._manager = manager
        self._logger = logger
        self._email_service = email_service

    async def handle(self, cmd: IssueToken) -> Result[TokenRecord, DomainError]:
        """Handle IssueToken command.

        Args:
            cmd: IssueToken command.

        Returns:
            Success(TokenRecord) or the manager's Failure unchanged.
        """
        match await self._manager.issue(cmd.email, cmd.purpose):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=issued):
                record: TokenRecord = issued

        if self._email_service is not None:
            try:
                await self._email_service.send_token_email(
                    to_email=record.email,
                    token=record.token,
                    purpose=record.purpose,
                    expires_at=record.expires_at,
                )
            except Exception as e:
                self._logger.warning(
                    "token_email_failed",
                    email=record.email,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )

        return Success(value=record)
