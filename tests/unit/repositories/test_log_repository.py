"""
Unit tests for LogRepository.

Tests retention, ordering and per-device reads.
"""
import asyncio

import pytest

from device_relay.infrastructure.memory import LogRepository

from tests.factories import LogEntryFactory


class TestLogRepositoryInit:
    """Test repository construction."""

    def test_rejects_non_positive_ceiling(self):
        with pytest.raises(ValueError):
            LogRepository(max_entries=0)

    @pytest.mark.asyncio
    async def test_starts_empty(self, log_repo):
        assert await log_repo.count() == 0
        assert await log_repo.list_all() == []


class TestAppend:
    """Test appending entries."""

    @pytest.mark.asyncio
    async def test_append_then_list_by_device(self, log_repo):
        """Test appended entry is visible for its device."""
        entry = LogEntryFactory(device_id="dev1", timestamp=1700000000)

        await log_repo.append(entry)

        rows = await log_repo.list_by_device("dev1")
        assert rows == [entry]

    @pytest.mark.asyncio
    async def test_retention_keeps_most_recent(self):
        """Test oldest entries are evicted once the ceiling is exceeded."""
        repo = LogRepository(max_entries=5)
        entries = [LogEntryFactory(device_id="dev1", timestamp=1000 + i) for i in range(12)]

        for entry in entries:
            await repo.append(entry)

        assert await repo.count() == 5
        retained = await repo.list_all()
        assert set(retained) == set(entries[-5:])

    @pytest.mark.asyncio
    async def test_eviction_is_by_insertion_not_timestamp(self):
        """Test a late-arriving old timestamp still counts as the newest append."""
        repo = LogRepository(max_entries=2)
        first = LogEntryFactory(timestamp=3000)
        second = LogEntryFactory(timestamp=2000)
        third = LogEntryFactory(timestamp=1000)

        for entry in (first, second, third):
            await repo.append(entry)

        retained = await repo.list_all()
        assert first not in retained
        assert set(retained) == {second, third}

    @pytest.mark.asyncio
    async def test_concurrent_appends_respect_ceiling(self):
        repo = LogRepository(max_entries=50)

        await asyncio.gather(*(repo.append(LogEntryFactory()) for _ in range(200)))

        assert await repo.count() == 50


class TestListAll:
    """Test global listing."""

    @pytest.mark.asyncio
    async def test_sorted_newest_first(self, log_repo):
        for ts in (1700000005, 1700000001, 1700000009):
            await log_repo.append(LogEntryFactory(device_id="dev1", timestamp=ts))

        rows = await log_repo.list_all()

        assert [r.timestamp for r in rows] == [1700000009, 1700000005, 1700000001]

    @pytest.mark.asyncio
    async def test_filters_by_device(self, log_repo):
        await log_repo.append(LogEntryFactory(device_id="dev1"))
        await log_repo.append(LogEntryFactory(device_id="dev2"))
        await log_repo.append(LogEntryFactory(device_id="dev1"))

        rows = await log_repo.list_all(device_id="dev1")

        assert len(rows) == 2
        assert all(r.device_id == "dev1" for r in rows)

    @pytest.mark.asyncio
    async def test_limit_truncates_after_sorting(self, log_repo):
        for ts in range(1, 11):
            await log_repo.append(LogEntryFactory(timestamp=ts))

        rows = await log_repo.list_all(limit=3)

        assert [r.timestamp for r in rows] == [10, 9, 8]

    @pytest.mark.asyncio
    async def test_returns_snapshot(self, log_repo):
        """Test later appends do not change a list already returned."""
        await log_repo.append(LogEntryFactory())
        rows = await log_repo.list_all()

        await log_repo.append(LogEntryFactory())

        assert len(rows) == 1


class TestListByDevice:
    """Test per-device listing."""

    @pytest.mark.asyncio
    async def test_descending_by_timestamp(self, log_repo):
        for ts in (20, 10, 30):
            await log_repo.append(LogEntryFactory(device_id="dev1", timestamp=ts))

        rows = await log_repo.list_by_device("dev1")

        assert [r.timestamp for r in rows] == [30, 20, 10]

    @pytest.mark.asyncio
    async def test_unknown_device_is_empty(self, log_repo):
        await log_repo.append(LogEntryFactory(device_id="dev1"))

        assert await log_repo.list_by_device("nope") == []


class TestLatest:
    """Test latest-entry lookup."""

    @pytest.mark.asyncio
    async def test_latest_picks_highest_timestamp(self, log_repo):
        newest = LogEntryFactory(device_id="dev1", timestamp=500)
        await log_repo.append(newest)
        await log_repo.append(LogEntryFactory(device_id="dev1", timestamp=100))
        await log_repo.append(LogEntryFactory(device_id="dev2", timestamp=900))

        assert await log_repo.latest("dev1") == newest

    @pytest.mark.asyncio
    async def test_latest_tie_prefers_last_appended(self, log_repo):
        first = LogEntryFactory(device_id="dev1", timestamp=100, temperature=20.0)
        second = LogEntryFactory(device_id="dev1", timestamp=100, temperature=21.0)
        await log_repo.append(first)
        await log_repo.append(second)

        assert await log_repo.latest("dev1") is second

    @pytest.mark.asyncio
    async def test_latest_missing_device_returns_none(self, log_repo):
        assert await log_repo.latest("ghost") is None

