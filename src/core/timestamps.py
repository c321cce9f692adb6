"""UTC clock and epoch-millisecond conversions.

All domain timestamps are timezone-aware UTC. The wire format (HTTP responses) and the Redis documents carry
timestamps as integer milliseconds since the Unix epoch.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime; the default clock."""
    return datetime.now(UTC)


def to_epoch_millis(value: datetime) -> int:
    """Convert an aware datetime to integer epoch milliseconds.

    Example:
        >>> to_epoch_millis(datetime(2025, 3, 1, 12, 0, tzinfo=UTC))
        1740830400000
    """
    return int(value.timestamp() * 1000)


def from_epoch_millis(value: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return datetime.fromtimestamp(value / 1000, tz=UTC)
