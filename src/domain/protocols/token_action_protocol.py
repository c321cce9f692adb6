"""TokenActionProtocol - capability spent by consuming a token.

Consume() runs the action at most once per token. The action reports its
own failures as Result values; on Failure the token is left unspent.
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result


class TokenActionProtocol(Protocol):
    """Privileged action authorized by a one-time token.

    Implementations:
        - SetPasswordAction: src/application/services/set_password_action.py
    """

    async def apply(self, email: str) -> Result[None, DomainError]:
        """Perform the action for the token's owner.

        Args:
            email: Email the token was issued for.

        Returns:
            Success(None), or Failure describing why the action did not happen.
        """
        ...
