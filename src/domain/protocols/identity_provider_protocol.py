"""IdentityProviderProtocol (port) for the managed identity service.

Only the password-reset consumer uses it; the token lifecycle manager
never touches identities.

Implementations:
    - FirebaseIdentityProvider: src/infrastructure/identity/firebase_identity_provider.py
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


@dataclass(frozen=True, slots=True)
class IdentityUser:
    """Minimal view of a user account in the identity provider.

    Attributes:
        uid: Provider-assigned user identifier.
        email: Account email.
    """

    uid: str
    email: str


class IdentityProviderProtocol(Protocol):
    """Protocol for identity provider operations."""

    async def find_user_by_email(
        self, email: str
    ) -> Result[IdentityUser | None, DomainError]:
        """Look up a user by email.

        Args:
            email: Account email.

        Returns:
            Success(user), Success(None) if no such user, Failure on provider
            errors.
        """
        ...

    async def set_password(self, uid: str, password: str) -> Result[None, DomainError]:
        """Replace a user's password.

        Args:
            uid: Provider user identifier.
            password: New plain-text password (hashed by the provider).

        Returns:
            Success(None), or Failure on provider errors.
        """
        ...
