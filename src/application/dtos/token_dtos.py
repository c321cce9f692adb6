"""Token lifecycle result DTOs.

Returned inside Success(...) by TokenLifecycleManager and the token
command handlers.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.enums import TokenPurpose


@dataclass(frozen=True, kw_only=True)
class ValidatedToken:
    """Result of a successful validation.

    Attributes:
        token: The validated code.
        email: Owner email.
        purpose: What the token authorizes.
        expires_at: Expiry timestamp.
        marked_as_used: Whether this validation spent the token.
    """

    token: str
    email: str
    purpose: TokenPurpose
    expires_at: datetime
    marked_as_used: bool = False


@dataclass(frozen=True, kw_only=True)
class ConsumedToken:
    """Result of a successful consumption.

    Attributes:
        token: The spent code.
        email: Owner email.
        purpose: What the token authorized.
        consumed_at: When the guarded action claimed the token.
    """

    token: str
    email: str
    purpose: TokenPurpose
    consumed_at: datetime


@dataclass(frozen=True, kw_only=True)
class PasswordResetResult:
    """Result of a successful password reset."""

    message: str = "Password reset successfully"
