"""TokenGenerationProtocol - source of candidate token values.

Implementations:
    - OtpTokenService: src/infrastructure/security/otp_token_service.py
"""

from typing import Protocol


class TokenGenerationProtocol(Protocol):
    """Produces candidate one-time token values."""

    def generate_token(self) -> str:
        """Generate a candidate token.

        Returns:
            6-digit numeric string, uniformly drawn from 100000-999999.
        """
        ...
