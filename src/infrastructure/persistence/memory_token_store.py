"""In-memory token store.

Used for local development without Firebase credentials and in tests.
State lives in a dict guarded by an asyncio.Lock, so every operation is
atomic with respect to other coroutines in the same event loop. Records
are lost on restart.
"""

import asyncio
from datetime import datetime
from typing import Any

from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities import TokenRecord


class InMemoryTokenStore:
    """Dict-backed implementation of TokenStoreProtocol.

    Note: Does NOT inherit from TokenStoreProtocol (uses structural typing).
    """

    def __init__(self) -> None:
        self._records: dict[str, TokenRecord] = {}
        self._lock = asyncio.Lock()

    async def create_if_absent(
        self, record: TokenRecord
    ) -> Result[bool, DomainError]:
        async with self._lock:
            if record.token in self._records:
                return Success(value=False)
            self._records[record.token] = record
            return Success(value=True)

    async def get(self, token: str) -> Result[TokenRecord | None, DomainError]:
        async with self._lock:
            return Success(value=self._records.get(token))

    async def compare_and_set(
        self,
        token: str,
        *,
        expected: dict[str, Any],
        changes: dict[str, Any],
    ) -> Result[bool, DomainError]:
        async with self._lock:
            record = self._records.get(token)
            if record is None:
                return Success(value=False)
            for name, value in expected.items():
                if getattr(record, name) != value:
                    return Success(value=False)
            self._records[token] = record.with_changes(**changes)
            return Success(value=True)

    async def delete_expired(self, before: datetime) -> Result[int, DomainError]:
        async with self._lock:
            expired = [
                token
                for token, record in self._records.items()
                if record.expires_at < before
            ]
            for token in expired:
                del self._records[token]
            return Success(value=len(expired))

    def __len__(self) -> int:
        return len(self._records)
