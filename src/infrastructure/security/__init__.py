"""Security infrastructure adapters.

- One-time code generation (6-digit numeric codes from secrets)
"""

from src.infrastructure.security.otp_token_service import OtpTokenService

__all__ = ["OtpTokenService"]
