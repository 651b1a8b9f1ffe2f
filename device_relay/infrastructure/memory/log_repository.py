"""
In-memory log store.

Keeps the most recent device reports in insertion order and enforces a
retention ceiling by evicting the oldest entries first.
"""
import asyncio
import logging
from collections import deque
from typing import Deque, List, Optional

from ...application.interfaces import LogStore
from ...domain.entities import LogEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 50_000


def _newest_first(entries: List[LogEntry]) -> List[LogEntry]:
    # sorted() is stable with reverse=True, so equal timestamps keep
    # their insertion order
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)


class LogRepository(LogStore):
    """
    Bounded, append-only repository for LogEntry objects.

    All reads return snapshots taken under the store lock, so callers never
    observe a partially applied append.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._lock = asyncio.Lock()

    async def append(self, entry: LogEntry) -> LogEntry:
        """
        Append an entry.

        The deque drops the oldest entry once the ceiling is reached.

        Args:
            entry: Validated log entry.

        Returns:
            The stored entry.
        """
        async with self._lock:
            if len(self._entries) == self._max_entries:
                evicted = self._entries[0]
                logger.debug(
                    f"Log store at capacity ({self._max_entries}), "
                    f"evicting entry from {evicted.device_id}"
                )
            self._entries.append(entry)
            return entry

    async def list_all(
        self,
        device_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[LogEntry]:
        """
        List entries newest first.

        Args:
            device_id: Only return entries from this device.
            limit: Maximum number of entries to return.

        Returns:
            Entries sorted by device timestamp, descending.
        """
        async with self._lock:
            if device_id is None:
                rows = list(self._entries)
            else:
                rows = [e for e in self._entries if e.device_id == device_id]

        rows = _newest_first(rows)
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def list_by_device(self, device_id: str) -> List[LogEntry]:
        return await self.list_all(device_id=device_id)

    async def latest(self, device_id: str) -> Optional[LogEntry]:
        """Get the entry with the highest timestamp; later appends win ties."""
        async with self._lock:
            best: Optional[LogEntry] = None
            for entry in self._entries:
                if entry.device_id != device_id:
                    continue
                if best is None or entry.timestamp >= best.timestamp:
                    best = entry
            return best

    async def count(self) -> int:
        async with self._lock:
            return len(self._entries)
