"""EmailProtocol - Port for delivering issued tokens by email.

Delivery is best effort: the token is valid whether or not the email
goes out, so callers log failures and continue.

Example Implementation:
    >>> class StubEmailService:
    ...     async def send_token_email(self, to_email, token, purpose, expires_at):
    ...         logger.info("token_email_stubbed", to_email=to_email)
"""

from datetime import datetime
from typing import Protocol

from src.domain.enums.token_purpose import TokenPurpose


class EmailProtocol(Protocol):
    """Email service protocol (port).

    Implementations raise on delivery failure.
    """

    async def send_token_email(
        self,
        to_email: str,
        token: str,
        purpose: TokenPurpose,
        expires_at: datetime,
    ) -> None:
        """Send the one-time code to its owner.

        Args:
            to_email: Recipient email address.
            token: The 6-digit code.
            purpose: What the code authorizes (selects the wording).
            expires_at: When the code stops working.
        """
        ...
