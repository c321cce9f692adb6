"""Unit tests for InMemoryTokenStore."""

from datetime import timedelta

import pytest

from src.core.result import Success
from src.domain.entities import TokenRecord
from src.domain.enums import TokenPurpose
from tests.conftest import START_TIME, STUDENT_EMAIL


def _record(token="482913", minutes=30) -> TokenRecord:
    return TokenRecord.issue(
        token=token,
        email=STUDENT_EMAIL,
        purpose=TokenPurpose.ACTIVATION,
        created_at=START_TIME,
        validity=timedelta(minutes=minutes),
    )


@pytest.mark.unit
class TestInMemoryTokenStore:
    async def test_create_if_absent(self, store):
        assert await store.create_if_absent(_record()) == Success(value=True)
        assert await store.create_if_absent(_record()) == Success(value=False)
        assert len(store) == 1

    async def test_get_missing(self, store):
        assert await store.get("000000") == Success(value=None)

    async def test_compare_and_set(self, store):
        await store.create_if_absent(_record())

        applied = await store.compare_and_set(
            "482913", expected={"is_used": False}, changes={"is_used": True}
        )
        rejected = await store.compare_and_set(
            "482913", expected={"is_used": False}, changes={"is_used": True}
        )

        assert applied == Success(value=True)
        assert rejected == Success(value=False)
        assert (await store.get("482913")).value.is_used is True

    async def test_compare_and_set_missing_record(self, store):
        result = await store.compare_and_set(
            "000000", expected={}, changes={"is_used": True}
        )

        assert result == Success(value=False)

    async def test_delete_expired(self, store):
        await store.create_if_absent(_record("111111", minutes=10))
        await store.create_if_absent(_record("222222", minutes=60))

        result = await store.delete_expired(START_TIME + timedelta(minutes=30))

        assert result == Success(value=1)
        assert (await store.get("111111")).value is None
        assert (await store.get("222222")).value is not None
