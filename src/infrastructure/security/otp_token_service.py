"""One-time code generation service.

Token Strategy:
    - 6-digit numeric code (100000..999999), easy to type on a phone
    - Drawn from the OS CSPRNG (secrets), never from random
    - Uniqueness is NOT guaranteed here; the token store rejects
      collisions and the lifecycle manager retries
"""

import secrets

from src.core.constants import TOKEN_MAX_VALUE, TOKEN_MIN_VALUE


class OtpTokenService:
    """Generates 6-digit numeric one-time codes.

    Usage:
        service = OtpTokenService()
        token = service.generate_token()  # e.g. "482913"
    """

    def generate_token(self) -> str:
        """Generate a code uniformly in [100000, 999999].

        Returns:
            6-character numeric string without a leading zero.

        Example:
            >>> token = OtpTokenService().generate_token()
            >>> len(token), token.isdigit()
            (6, True)
        """
        span = TOKEN_MAX_VALUE - TOKEN_MIN_VALUE + 1
        return str(TOKEN_MIN_VALUE + secrets.randbelow(span))
