"""TokenStoreProtocol (port) for token record persistence.

The lifecycle manager only ever talks to this protocol. Infrastructure
provides Firestore, Redis and in-memory adapters.

Atomicity contract:
- create_if_absent must be a single atomic "create only if the key does not
  exist" operation. A separate read followed by a write is not acceptable:
  two issuers could both see the key as free.
- compare_and_set must read the record and apply the update in one atomic
  step (transaction, WATCH/MULTI, or a lock). It returns False instead of
  writing when the stored fields differ from `expected`.

Field names used in `expected` and `changes` are TokenRecord attribute
names (is_used, used_at, consumed_at); adapters translate them to their
own document layout.

Architecture:
- Protocol-based (structural typing, no inheritance required)
- All operations return Result types; adapters map client exceptions to
  InfrastructureError
"""

from datetime import datetime
from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities.token_record import TokenRecord


class TokenStoreProtocol(Protocol):
    """Protocol for token record persistence.

    Implementations:
        - FirestoreTokenStore: src/infrastructure/persistence/firestore_token_store.py
        - RedisTokenStore: src/infrastructure/persistence/redis_token_store.py
        - InMemoryTokenStore: src/infrastructure/persistence/memory_token_store.py
    """

    async def create_if_absent(
        self, record: TokenRecord
    ) -> Result[bool, DomainError]:
        """Persist a new record unless its token key is already taken.

        Args:
            record: Record to create, keyed by record.token.

        Returns:
            Success(True) if created, Success(False) if the key already
            existed, Failure on store errors.
        """
        ...

    async def get(self, token: str) -> Result[TokenRecord | None, DomainError]:
        """Load a record by token value.

        Args:
            token: Token value (record key).

        Returns:
            Success(record), Success(None) if absent, Failure on store errors.
        """
        ...

    async def compare_and_set(
        self,
        token: str,
        *,
        expected: dict[str, Any],
        changes: dict[str, Any],
    ) -> Result[bool, DomainError]:
        """Atomically update a record if its current fields match.

        Args:
            token: Token value (record key).
            expected: Field values the stored record must have.
            changes: Field values to write when the condition holds.

        Returns:
            Success(True) if applied, Success(False) if the record is absent
            or a field did not match, Failure on store errors.

        Example:
            >>> await store.compare_and_set(
            ...     "482913",
            ...     expected={"is_used": False},
            ...     changes={"is_used": True, "used_at": now},
            ... )
        """
        ...

    async def delete_expired(self, before: datetime) -> Result[int, DomainError]:
        """Delete records whose expires_at is earlier than `before`.

        Out-of-band cleanup; never called on the request path.

        Args:
            before: Cutoff timestamp.

        Returns:
            Success(number of deleted records), Failure on store errors.
        """
        ...
