"""Tests for async Index variants."""

import pytest


@pytest.mark.asyncio
async def test_async_round_trip(index):
    await index.create_async(0, 69, 10, 1)
    await index.create_async(0, 69, 20, 1)
    await index.create_async(0, 69, 30, 1)

    assert await index.exists_async(0, 69, 10)

    await index.delete_async(0, 69, 10)

    assert await index.get_async(0, 69, 1) == [30, 20]
    assert not await index.exists_async(0, 69, 10)


@pytest.mark.asyncio
async def test_async_delete_absent_is_noop(index):
    await index.delete_async(0, 69, 1)
    assert await index.get_async(0, 69, 0) == []
