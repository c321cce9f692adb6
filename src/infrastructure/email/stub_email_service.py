"""Stub email service for development and testing.

Logs the delivery instead of sending anything. The code itself is never
written to the log; only its owner, purpose and expiry.
"""

from datetime import datetime

from src.domain.enums import TokenPurpose
from src.domain.protocols import LoggerProtocol

_SUBJECTS: dict[TokenPurpose, str] = {
    TokenPurpose.ACTIVATION: "Your Carona account activation code",
    TokenPurpose.PASSWORD_RESET: "Your Carona password reset code",
}


class StubEmailService:
    """EmailProtocol implementation that only logs.

    Note: Does NOT inherit from EmailProtocol (uses structural typing).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send_token_email(
        self,
        to_email: str,
        token: str,
        purpose: TokenPurpose,
        expires_at: datetime,
    ) -> None:
        self._logger.info(
            "token_email_stubbed",
            to_email=to_email,
            subject=_SUBJECTS[purpose],
            purpose=purpose.value,
            expires_at=expires_at.isoformat(),
        )
