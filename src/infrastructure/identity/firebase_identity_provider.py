"""Firebase Auth identity provider.

Implements IdentityProviderProtocol on top of firebase_admin.auth. The
Admin SDK is synchronous, so each call runs in a worker thread to keep
the event loop free.

Architecture:
- Implements IdentityProviderProtocol without inheritance
- Maps FirebaseError to IdentityProviderError (INTERNAL_ERROR)
- "No such user" is a normal outcome (Success(None)), not an error
"""

import asyncio

import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import IdentityUser
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import IdentityProviderError


class FirebaseIdentityProvider:
    """Firebase Auth implementation of IdentityProviderProtocol.

    Example:
        >>> provider = FirebaseIdentityProvider(get_firebase_app())
        >>> match await provider.find_user_by_email("aluno@cs.udf.edu.br"):
        ...     case Success(value=IdentityUser(uid=uid)):
        ...         await provider.set_password(uid, "n3w-passw0rd")
    """

    def __init__(self, app: firebase_admin.App | None = None) -> None:
        """Initialize provider.

        Args:
            app: Firebase app; the default app when None.
        """
        self._app = app

    async def find_user_by_email(
        self, email: str
    ) -> Result[IdentityUser | None, DomainError]:
        try:
            user = await asyncio.to_thread(
                auth.get_user_by_email, email, app=self._app
            )
        except auth.UserNotFoundError:
            return Success(value=None)
        except FirebaseError as e:
            return Failure(
                error=IdentityProviderError(
                    infrastructure_code=InfrastructureErrorCode.IDENTITY_LOOKUP_ERROR,
                    details={"error": str(e), "code": e.code},
                )
            )
        return Success(value=IdentityUser(uid=user.uid, email=user.email or email))

    async def set_password(self, uid: str, password: str) -> Result[None, DomainError]:
        try:
            await asyncio.to_thread(
                auth.update_user, uid, password=password, app=self._app
            )
        except FirebaseError as e:
            return Failure(
                error=IdentityProviderError(
                    infrastructure_code=InfrastructureErrorCode.IDENTITY_UPDATE_ERROR,
                    details={"uid": uid, "error": str(e), "code": e.code},
                )
            )
        except ValueError as e:
            # Raised by the SDK for arguments it rejects locally (e.g. password
            # shorter than six characters).
            return Failure(
                error=IdentityProviderError(
                    infrastructure_code=InfrastructureErrorCode.IDENTITY_UPDATE_ERROR,
                    details={"uid": uid, "error": str(e)},
                )
            )
        return Success(value=None)
