"""SetPasswordAction - the privileged action behind a password-reset token.

Resolves the token owner in the identity provider and replaces their
password. Runs only after TokenLifecycleManager.consume() has claimed the
token, so it never sees an unverified request.
"""

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import USER_NOT_FOUND_MESSAGE, IdentityError
from src.domain.protocols import IdentityProviderProtocol


class SetPasswordAction:
    """Set a new password for the account owning a token.

    Example:
        >>> action = SetPasswordAction(identity_provider, "n3w-passw0rd")
        >>> await manager.consume(email, token, action)
    """

    def __init__(
        self, identity_provider: IdentityProviderProtocol, new_password: str
    ) -> None:
        self._identity_provider = identity_provider
        self._new_password = new_password

    async def apply(self, email: str) -> Result[None, DomainError]:
        """Replace the password of the user registered under `email`.

        Returns:
            Success(None), Failure(IdentityError USER_NOT_FOUND) when no account
            exists, or the provider's Failure unchanged.
        """
        match await self._identity_provider.find_user_by_email(email):
            case Failure(error=err):
                return Failure(error=err)
            case Success(value=None):
                return Failure(
                    error=IdentityError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=USER_NOT_FOUND_MESSAGE,
                    )
                )
            case Success(value=user):
                return await self._identity_provider.set_password(
                    user.uid, self._new_password
                )
