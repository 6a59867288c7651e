"""Bounded in-memory operation journal."""

from __future__ import annotations

import threading
from collections import deque

from entityindex.tracing.models import OperationRecord


class InMemoryJournal:
    """Keeps the most recent `max_records` mutations in a ring buffer.

    Args:
        max_records: Capacity. 0 keeps nothing.
    """

    def __init__(self, max_records: int = 1000) -> None:
        self._records: deque[OperationRecord] = deque(maxlen=max_records)
        self._lock = threading.Lock()

    def record(self, record: OperationRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(
        self, partition: int | None = None, table: int | None = None
    ) -> list[OperationRecord]:
        """Get records oldest first, optionally filtered.

        Args:
            partition: Only records from this partition.
            table: Only records from this table.

        Returns:
            List of matching records.
        """
        with self._lock:
            snapshot = list(self._records)
        return [
            r
            for r in snapshot
            if (partition is None or r.partition == partition)
            and (table is None or r.table == table)
        ]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    @property
    def record_count(self) -> int:
        return len(self._records)
