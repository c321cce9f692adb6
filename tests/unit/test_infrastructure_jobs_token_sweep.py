"""Unit tests for SweepExpiredTokensJob.

Tests cover:
- run_once() deletes only records past the retention cutoff
- Store failures are logged and returned, not raised
- run_forever() keeps sweeping after an unexpected exception
- run_forever() stops cleanly on cancellation
- The default clock is the UTC wall clock
"""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from freezegun import freeze_time

from src.core.result import Failure, Success
from src.domain.entities import TokenRecord
from src.domain.enums import TokenPurpose
from src.infrastructure.errors import StoreError
from src.infrastructure.jobs import SweepExpiredTokensJob
from tests.conftest import START_TIME, STUDENT_EMAIL


def _record(token: str, created_minutes_ago: int) -> TokenRecord:
    return TokenRecord.issue(
        token=token,
        email=STUDENT_EMAIL,
        purpose=TokenPurpose.ACTIVATION,
        created_at=START_TIME - timedelta(minutes=created_minutes_ago),
        validity=timedelta(minutes=30),
    )


def _job(store, logger, clock) -> SweepExpiredTokensJob:
    return SweepExpiredTokensJob(
        store=store,
        logger=logger,
        retention=timedelta(minutes=60),
        interval=timedelta(milliseconds=1),
        clock=clock,
    )


@pytest.mark.unit
class TestSweepExpiredTokensJob:
    async def test_run_once_deletes_records_past_retention(self, store, logger, clock):
        # Expired 5 minutes ago: kept. Expired 90 minutes ago: deleted.
        await store.create_if_absent(_record("111111", created_minutes_ago=35))
        await store.create_if_absent(_record("222222", created_minutes_ago=120))
        await store.create_if_absent(_record("333333", created_minutes_ago=0))

        result = await _job(store, logger, clock).run_once()

        assert result == Success(value=1)
        assert (await store.get("222222")).value is None
        assert (await store.get("111111")).value is not None
        logger.info.assert_called_once()
        assert logger.info.call_args.args[0] == "token_sweep_completed"

    async def test_cutoff_is_now_minus_retention(self, logger, clock):
        store = AsyncMock()
        store.delete_expired.return_value = Success(value=0)

        await _job(store, logger, clock).run_once()

        store.delete_expired.assert_awaited_once_with(START_TIME - timedelta(minutes=60))

    async def test_store_failure_is_logged(self, logger, clock):
        store = AsyncMock()
        store.delete_expired.return_value = Failure(error=StoreError())

        result = await _job(store, logger, clock).run_once()

        assert isinstance(result, Failure)
        assert logger.error.call_args.args[0] == "token_sweep_failed"

    async def test_run_forever_stops_on_cancel(self, clock):
        store = AsyncMock()
        store.delete_expired.return_value = Success(value=0)
        logger = MagicMock()

        task = asyncio.create_task(_job(store, logger, clock).run_forever())
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert store.delete_expired.await_count >= 1
        assert logger.info.call_args.args[0] == "token_sweep_stopped"

    async def test_run_forever_survives_unexpected_exception(self, clock):
        store = AsyncMock()
        boom = TypeError("'<' not supported between instances of 'str' and 'int'")
        calls = []

        async def delete_expired(cutoff):
            calls.append(cutoff)
            if len(calls) == 1:
                raise boom
            return Success(value=0)

        store.delete_expired = delete_expired
        logger = MagicMock()

        task = asyncio.create_task(_job(store, logger, clock).run_forever())
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert len(calls) >= 2
        logger.error.assert_called_once_with("token_sweep_crashed", error=boom)

    async def test_default_clock_is_utc_wall_clock(self, logger):
        store = AsyncMock()
        store.delete_expired.return_value = Success(value=0)
        job = SweepExpiredTokensJob(
            store=store,
            logger=logger,
            retention=timedelta(minutes=60),
            interval=timedelta(hours=1),
        )

        with freeze_time("2025-03-01 12:00:00"):
            await job.run_once()

        store.delete_expired.assert_awaited_once_with(
            datetime(2025, 3, 1, 11, 0, tzinfo=UTC)
        )
