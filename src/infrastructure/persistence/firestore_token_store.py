"""Firestore token store.

Records live in one collection (default "activationTokens"); the token
value is the document ID. Timestamps are stored as native Firestore
timestamps.

Atomicity:
- create_if_absent uses DocumentReference.create(), which fails with
  AlreadyExists instead of overwriting
- compare_and_set runs inside an async transaction; Firestore retries the
  function on contention, so the comparison always sees committed data
- Every RPC carries the configured per-call timeout

Architecture:
- Implements TokenStoreProtocol without inheritance (structural typing)
- Maps google.api_core exceptions to StoreError (INTERNAL_ERROR)
- Returns Result types for all operations
"""

from datetime import datetime
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud.firestore import (
    AsyncClient,
    AsyncDocumentReference,
    AsyncTransaction,
    async_transactional,
)
from google.cloud.firestore_v1.base_query import FieldFilter

from src.core.constants import DEFAULT_TOKEN_COLLECTION
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import TokenRecord
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import StoreError
from src.infrastructure.persistence.token_document import (
    encode_fields,
    from_document,
    to_document,
)

# Firestore caps a write batch at 500 operations.
_DELETE_BATCH_SIZE = 500


@async_transactional
async def _compare_and_update(
    transaction: AsyncTransaction,
    doc_ref: AsyncDocumentReference,
    wanted: dict[str, Any],
    update: dict[str, Any],
    *,
    timeout: float,
) -> bool:
    snapshot = await doc_ref.get(transaction=transaction, timeout=timeout)
    if not snapshot.exists:
        return False
    document = snapshot.to_dict() or {}
    if any(document.get(name) != value for name, value in wanted.items()):
        return False
    transaction.update(doc_ref, update)
    return True


class FirestoreTokenStore:
    """Firestore implementation of TokenStoreProtocol.

    Attributes:
        _client: Async Firestore client (firebase_admin.firestore_async).
        _collection_name: Collection holding token documents.
        _timeout: Per-call timeout in seconds.
    """

    def __init__(
        self,
        client: AsyncClient,
        *,
        collection: str = DEFAULT_TOKEN_COLLECTION,
        timeout: float = 10.0,
    ) -> None:
        """Initialize Firestore token store.

        Args:
            client: Async Firestore client.
            collection: Collection name.
            timeout: Per-call timeout in seconds.
        """
        self._client = client
        self._collection_name = collection
        self._timeout = timeout

    def _doc(self, token: str) -> AsyncDocumentReference:
        return self._client.collection(self._collection_name).document(token)

    async def create_if_absent(
        self, record: TokenRecord
    ) -> Result[bool, DomainError]:
        """Create the document; AlreadyExists means the key is taken."""
        try:
            await self._doc(record.token).create(
                to_document(record), timeout=self._timeout
            )
        except google_exceptions.AlreadyExists:
            return Success(value=False)
        except google_exceptions.GoogleAPIError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_WRITE_ERROR, "create_if_absent", e
                )
            )
        return Success(value=True)

    async def get(self, token: str) -> Result[TokenRecord | None, DomainError]:
        """Load one document by token."""
        try:
            snapshot = await self._doc(token).get(timeout=self._timeout)
        except google_exceptions.GoogleAPIError as e:
            return Failure(
                error=self._error(InfrastructureErrorCode.STORE_READ_ERROR, "get", e)
            )
        if not snapshot.exists:
            return Success(value=None)
        try:
            return Success(value=from_document(snapshot.to_dict() or {}))
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
        """Apply `changes` in a transaction if the stored fields equal `expected`."""
        try:
            applied = await _compare_and_update(
                self._client.transaction(),
                self._doc(token),
                encode_fields(expected),
                encode_fields(changes),
                timeout=self._timeout,
            )
        except google_exceptions.GoogleAPIError as e:
            return Failure(
                error=self._error(
                    InfrastructureErrorCode.STORE_WRITE_ERROR, "compare_and_set", e
                )
            )
        return Success(value=applied)

    async def delete_expired(self, before: datetime) -> Result[int, DomainError]:
        """Delete documents with expiresAt earlier than `before`, in batches."""
        query = self._client.collection(self._collection_name).where(
            filter=FieldFilter("expiresAt", "<", before)
        )
        deleted = 0
        try:
            batch = self._client.batch()
            pending = 0
            async for snapshot in query.stream(timeout=self._timeout):
                batch.delete(snapshot.reference)
                pending += 1
                if pending == _DELETE_BATCH_SIZE:
                    await batch.commit(timeout=self._timeout)
                    deleted += pending
                    batch = self._client.batch()
                    pending = 0
            if pending:
                await batch.commit(timeout=self._timeout)
                deleted += pending
        except google_exceptions.GoogleAPIError as e:
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
                "backend": "firestore",
                "operation": operation,
                "error": str(e),
                "type": type(e).__name__,
            },
        )
