"""Redis token store.

Each record is one JSON string under "<prefix>:<token>" with timestamps
as epoch milliseconds.

Atomicity:
- create_if_absent uses SET NX, so only one writer can claim a key
- compare_and_set uses WATCH/MULTI; a concurrent write to the key aborts
  the transaction and is reported as a lost race (Success(False))

Keys carry a TTL of validity plus retention, so Redis drops stale records
on its own; delete_expired is still provided for the sweep job.

Architecture:
- Implements TokenStoreProtocol without inheritance (structural typing)
- Maps Redis exceptions to StoreError (INTERNAL_ERROR)
- Returns Result types for all operations
"""

import json
from datetime import datetime, timedelta
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError, WatchError

from src.core.constants import REDIS_TOKEN_KEY_PREFIX
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.timestamps import from_epoch_millis, to_epoch_millis
from src.domain.entities import TokenRecord
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import StoreError
from src.infrastructure.persistence.token_document import (
    encode_fields,
    from_document,
    to_document,
)


class RedisTokenStore:
    """Redis implementation of TokenStoreProtocol.

    Attributes:
        _redis: Async Redis client (decode_responses=True).
        _prefix: Key prefix.
        _retention: How long a record is kept after it expires.
    """

    def __init__(
        self,
        redis_client: Redis,
        *,
        key_prefix: str = REDIS_TOKEN_KEY_PREFIX,
        retention: timedelta = timedelta(days=1),
    ) -> None:
        """Initialize Redis token store.

        Args:
            redis_client: Async Redis client instance.
            key_prefix: Namespace for token keys.
            retention: Extra lifetime after expiry before Redis evicts a key.
        """
        self._redis = redis_client
        self._prefix = key_prefix
        self._retention = retention

    def _key(self, token: str) -> str:
        return f"{self._prefix}:{token}"

    async def create_if_absent(
        self, record: TokenRecord
    ) -> Result[bool, DomainError]:
        """Create the record with SET NX PX."""
        ttl = record.expires_at - record.created_at + self._retention
        payload = json.dumps(to_document(record, to_epoch_millis))
        try:
            created = await self._redis.set(
                self._key(record.token),
                payload,
                nx=True,
                px=max(int(ttl.total_seconds() * 1000), 1),
            )
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_WRITE_ERROR, "create_if_absent", e
                )
            )
        return Success(value=bool(created))

    async def get(self, token: str) -> Result[TokenRecord | None, DomainError]:
        """Load and decode one record."""
        try:
            raw = await self._redis.get(self._key(token))
        except RedisError as e:
            return Failure(
                error=self._error(InfrastructureErrorCode.STORE_READ_ERROR, "get", e)
            )
        if raw is None:
            return Success(value=None)
        try:
            return Success(value=from_document(json.loads(raw), from_epoch_millis))
        except (KeyError, ValueError, TypeError) as e:
            return Failure(
                error=self._error(InfrastructureErrorCode.STORE_DATA_ERROR, "get", e)
            )

    async def compare_and_set(
        self,
        token: str,
        *,
        expected: dict[str, Any],
        changes: dict[str, Any],
    ) -> Result[bool, DomainError]:
        """Apply `changes` under WATCH if the stored fields equal `expected`."""
        key = self._key(token)
        wanted = encode_fields(expected, to_epoch_millis)
        update = encode_fields(changes, to_epoch_millis)
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                await pipe.watch(key)
                raw = await pipe.get(key)
                if raw is None:
                    return Success(value=False)
                document = json.loads(raw)
                if any(document.get(name) != value for name, value in wanted.items()):
                    return Success(value=False)
                document.update(update)
                pipe.multi()
                pipe.set(key, json.dumps(document), keepttl=True)
                await pipe.execute()
        except WatchError:
            return Success(value=False)
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_WRITE_ERROR, "compare_and_set", e
                )
            )
        except ValueError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_DATA_ERROR, "compare_and_set", e
                )
            )
        return Success(value=True)

    async def delete_expired(self, before: datetime) -> Result[int, DomainError]:
        """Scan the prefix and delete records that expired before `before`."""
        cutoff = to_epoch_millis(before)
        deleted = 0
        try:
            async for key in self._redis.scan_iter(match=f"{self._prefix}:*"):
                raw = await self._redis.get(key)
                if raw is None:
                    continue
                try:
                    expires_at = int(json.loads(raw)["expiresAt"])
                except (KeyError, ValueError, TypeError):
                    continue
                if expires_at < cutoff:
                    deleted += await self._redis.delete(key)
        except RedisError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_DELETE_ERROR, "delete_expired", e
                )
            )
        return Success(value=deleted)

    @staticmethod
    def _error(
        code: InfrastructureErrorCode, operation: str, e: Exception
    ) -> StoreError:
        return StoreError(
            infrastructure_code=code,
            details={
                "backend": "redis",
                "operation": operation,
                "error": str(e),
                "type": type(e).__name__,
            },
        )
