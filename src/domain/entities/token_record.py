"""TokenRecord domain entity.

Pure business logic, no framework dependencies.

A TokenRecord is the stored state of one one-time token. The token value
itself is the record's identity: stores key records by it and no other
identifier exists.

State machine:
    Created (unused) -> Used
    Created (unused) -> Expired   (derived from the clock, never stored)
    Used and Expired are terminal.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from src.domain.enums.token_purpose import TokenPurpose


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenRecord:
    """Stored state of a one-time token.

    Business Rules:
        - expires_at is strictly after created_at
        - is_used only ever goes from False to True
        - consumed_at is set while a guarded action runs or after it succeeded;
          a record with consumed_at set can not authorize another action
        - expiry is recomputed on every read (is_expired), never persisted

    Attributes:
        token: 6-digit numeric string, the record key.
        email: Institutional email the token was issued for.
        purpose: Privileged action the token authorizes.
        created_at: Issuance time (UTC).
        expires_at: Expiry time (UTC).
        is_used: Whether the token was spent (validated-and-marked or consumed).
        used_at: When is_used was set.
        consumed_at: When a guarded action claimed the token.

    Example:
        >>> from datetime import UTC, datetime, timedelta
        >>> now = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)
        >>> record = TokenRecord.issue(
        ...     token="482913",
        ...     email="aluno@cs.udf.edu.br",
        ...     purpose=TokenPurpose.ACTIVATION,
        ...     created_at=now,
        ...     validity=timedelta(minutes=30),
        ... )
        >>> record.is_expired(now + timedelta(minutes=31))
        True
    """

    token: str
    email: str
    purpose: TokenPurpose
    created_at: datetime
    expires_at: datetime
    is_used: bool = False
    used_at: datetime | None = None
    consumed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.expires_at <= self.created_at:
            raise ValueError("expires_at must be after created_at")

    @classmethod
    def issue(
        cls,
        *,
        token: str,
        email: str,
        purpose: TokenPurpose,
        created_at: datetime,
        validity: timedelta,
    ) -> "TokenRecord":
        """Build a fresh, unused record.

        Args:
            token: Candidate token value.
            email: Owner email.
            purpose: Token purpose.
            created_at: Issuance time.
            validity: Validity window added to created_at.

        Returns:
            New unused TokenRecord.
        """
        return cls(
            token=token,
            email=email,
            purpose=purpose,
            created_at=created_at,
            expires_at=created_at + validity,
        )

    def is_expired(self, now: datetime) -> bool:
        """Check whether the token is past its expiry at the given time.

        Args:
            now: Current time.

        Returns:
            True if now is strictly after expires_at.
        """
        return now > self.expires_at

    def belongs_to(self, email: str) -> bool:
        """Check whether the token was issued for this email."""
        return self.email == email

    @property
    def is_consumed(self) -> bool:
        """True once a guarded action has claimed this token."""
        return self.consumed_at is not None

    def with_changes(self, **changes: object) -> "TokenRecord":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]
