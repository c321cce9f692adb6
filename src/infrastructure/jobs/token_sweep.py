"""Expired token sweep job.

Deletes token records that expired more than the retention window ago.
Runs inside the API process as an asyncio task started by the FastAPI
lifespan; never on the request path.

Architecture:
- Depends only on TokenStoreProtocol and LoggerProtocol
- Store failures and unexpected exceptions are logged; the loop keeps going
"""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta

from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.core.timestamps import utc_now
from src.domain.protocols import LoggerProtocol, TokenStoreProtocol


class SweepExpiredTokensJob:
    """Periodic cleanup of expired token records.

    Usage:
        job = SweepExpiredTokensJob(
            store=get_token_store(),
            logger=get_logger(),
            retention=timedelta(days=1),
            interval=timedelta(hours=1),
        )
        task = asyncio.create_task(job.run_forever())
    """

    def __init__(
        self,
        *,
        store: TokenStoreProtocol,
        logger: LoggerProtocol,
        retention: timedelta,
        interval: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._logger = logger
        self._retention = retention
        self._interval = interval
        self._clock = clock

    async def run_once(self) -> Result[int, DomainError]:
        """Delete records whose expiry is older than now minus retention.

        Returns:
            Success(number of deleted records) or the store's Failure.
        """
        cutoff = self._clock() - self._retention
        result = await self._store.delete_expired(cutoff)
        match result:
            case Success(value=deleted):
                self._logger.info(
                    "token_sweep_completed",
                    deleted=deleted,
                    cutoff=cutoff.isoformat(),
                )
            case Failure(error=err):
                self._logger.error(
                    "token_sweep_failed",
                    error_code=err.code.value,
                    details=err.details,
                )
        return result

    async def run_forever(self) -> None:
        """Sweep, then sleep for the interval, until cancelled."""
        self._logger.info(
            "token_sweep_started",
            interval_seconds=int(self._interval.total_seconds()),
        )
        try:
            while True:
                try:
                    await self.run_once()
                except Exception as e:
                    self._logger.error("token_sweep_crashed", error=e)
                await asyncio.sleep(self._interval.total_seconds())
        except asyncio.CancelledError:
            self._logger.info("token_sweep_stopped")
            raise
