"""TokenRecord <-> stored document mapping shared by the token stores.

Documents use the camelCase layout the mobile app and the Firestore
console already know: token, email, purpose, createdAt, expiresAt,
isUsed, usedAt, consumedAt. Timestamps are passed through `encode_time`
so each backend can keep its native format (Firestore timestamps,
epoch milliseconds in Redis).
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from src.domain.entities import TokenRecord
from src.domain.enums import TokenPurpose

FIELD_NAMES: dict[str, str] = {
    "token": "token",
    "email": "email",
    "purpose": "purpose",
    "created_at": "createdAt",
    "expires_at": "expiresAt",
    "is_used": "isUsed",
    "used_at": "usedAt",
    "consumed_at": "consumedAt",
}

_TIME_FIELDS = frozenset({"created_at", "expires_at", "used_at", "consumed_at"})


def _identity(value: datetime) -> Any:
    return value


def encode_fields(
    fields: dict[str, Any],
    encode_time: Callable[[datetime], Any] = _identity,
) -> dict[str, Any]:
    """Translate TokenRecord attribute names and values to document form.

    Args:
        fields: Mapping of TokenRecord attribute name to value.
        encode_time: Converts datetimes to the backend's timestamp format.

    Returns:
        Mapping of document field name to stored value.

    Raises:
        KeyError: If a field is not a TokenRecord attribute.
    """
    encoded: dict[str, Any] = {}
    for name, value in fields.items():
        if isinstance(value, TokenPurpose):
            value = value.value
        elif name in _TIME_FIELDS and value is not None:
            value = encode_time(value)
        encoded[FIELD_NAMES[name]] = value
    return encoded


def to_document(
    record: TokenRecord,
    encode_time: Callable[[datetime], Any] = _identity,
) -> dict[str, Any]:
    """Serialize a record to its stored document."""
    return encode_fields(
        {name: getattr(record, name) for name in FIELD_NAMES},
        encode_time,
    )


def from_document(
    document: dict[str, Any],
    decode_time: Callable[[Any], datetime] = _identity,
) -> TokenRecord:
    """Rebuild a record from a stored document.

    Documents written before usedAt/consumedAt existed load with those
    fields unset, and a missing purpose reads as activation.

    Raises:
        KeyError: If a required field is absent.
        ValueError: If a value can not be converted.
    """

    def _time(key: str) -> datetime | None:
        value = document.get(key)
        return None if value is None else decode_time(value)

    created_at = _time("createdAt")
    expires_at = _time("expiresAt")
    if created_at is None or expires_at is None:
        raise KeyError("createdAt and expiresAt are required")

    return TokenRecord(
        token=str(document["token"]),
        email=document["email"],
        purpose=TokenPurpose(document.get("purpose") or TokenPurpose.ACTIVATION.value),
        created_at=created_at,
        expires_at=expires_at,
        is_used=bool(document.get("isUsed", False)),
        used_at=_time("usedAt"),
        consumed_at=_time("consumedAt"),
    )
