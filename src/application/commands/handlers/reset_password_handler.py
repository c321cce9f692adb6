"""Reset Password handler.

Flow:
1. Check email, token and new_password are present strings
2. Check the institutional email domain
3. Check the password meets the minimum length
4. Consume the token with SetPasswordAction (lookup user, set password)
5. Return Success(PasswordResetResult)

The token is spent only if the identity provider accepted the new
password. A failed update leaves the token usable for a retry.

Architecture:
- Application layer ONLY imports from domain layer and application services
- NO infrastructure imports (identity provider injected via protocol)
"""

from src.application.commands.token_commands import ResetPassword
from src.application.dtos import PasswordResetResult
from src.application.services import SetPasswordAction, TokenLifecycleManager
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    validate_institutional_email,
    validate_min_length,
    validate_required,
)
from src.domain.protocols import IdentityProviderProtocol, LoggerProtocol


class ResetPasswordHandler:
    """Handler for ResetPassword command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (protocols, errors)
    - Infrastructure layer (identity provider via dependency injection)
    """

    def __init__(
        self,
        manager: TokenLifecycleManager,
        identity_provider: IdentityProviderProtocol,
        logger: LoggerProtocol,
        email_domain: str,
        min_password_length: int = 8,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            manager: Token lifecycle manager.
            identity_provider: Identity service holding the accounts.
            logger: Structured logger.
            email_domain: Required email suffix.
            min_password_length: Minimum accepted password length.
        """
        self._manager = manager
        self._identity_provider = identity_provider
        self._logger = logger
        self._email_domain = email_domain
        self._min_password_length = min_password_length

    async def handle(
        self, cmd: ResetPassword
    ) -> Result[PasswordResetResult, DomainError]:
        """Handle ResetPassword command.

        Args:
            cmd: ResetPassword command.

        Returns:
            Success(PasswordResetResult), or Failure from validation, the
            token checks, or the identity provider.
        """
        # Step 1-3: request preconditions, in order
        match validate_required(
            {"email": cmd.email, "token": cmd.token, "newPassword": cmd.new_password},
            code=ErrorCode.MISSING_FIELDS,
        ):
            case Failure(error=err):
                return Failure(error=err)
        match validate_institutional_email(cmd.email, self._email_domain):
            case Failure(error=err):
                return Failure(error=err)
        match validate_min_length(
            cmd.new_password, self._min_password_length, "newPassword"
        ):
            case Failure(error=err):
                return Failure(error=err)

        # Step 4: spend the token on the password change
        action = SetPasswordAction(self._identity_provider, cmd.new_password)
        match await self._manager.consume(cmd.email, cmd.token, action):
            case Failure(error=err):
                return Failure(error=err)

        self._logger.info("password_reset_completed", email=cmd.email)
        return Success(value=PasswordResetResult())
