"""Token handler dependency factories.

Request-scoped handler instances for the HTTP routes. Handlers are cheap
wrappers around the application-scoped manager; tests replace these
factories through app.dependency_overrides.
"""

from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import (
    get_email_notifier,
    get_identity_provider,
    get_logger,
    get_token_lifecycle_manager,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        IssueTokenHandler,
        ResetPasswordHandler,
        ValidateTokenHandler,
    )


async def get_issue_token_handler() -> "IssueTokenHandler":
    """Get IssueToken command handler (request-scoped)."""
    from src.application.commands.handlers import IssueTokenHandler

    return IssueTokenHandler(
        manager=get_token_lifecycle_manager(),
        logger=get_logger(),
        email_service=get_email_notifier(),
    )


async def get_validate_token_handler() -> "ValidateTokenHandler":
    """Get ValidateToken command handler (request-scoped)."""
    from src.application.commands.handlers import ValidateTokenHandler

    return ValidateTokenHandler(manager=get_token_lifecycle_manager())


async def get_reset_password_handler() -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from src.application.commands.handlers import ResetPasswordHandler

    return ResetPasswordHandler(
        manager=get_token_lifecycle_manager(),
        identity_provider=get_identity_provider(),
        logger=get_logger(),
        email_domain=settings.institutional_email_domain,
        min_password_length=settings.min_password_length,
    )
