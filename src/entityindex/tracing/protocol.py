"""Protocols for tracing infrastructure.

These protocols define the interface for operation journals, allowing
different implementations (in-memory, file, database).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entityindex.tracing.models import OperationRecord


@runtime_checkable
class OperationJournal(Protocol):
    """Protocol for storing index mutation history.

    Usage:
        journal = InMemoryJournal(max_records=1000)
        index = Index(journal=journal)

        index.create(0, 69, 420, 1)
        records = journal.records(partition=0, table=69)

    Thread Safety:
        The index calls record() while holding the table lock, so calls for
        one table never interleave. Calls for different tables may.
    """

    def record(self, record: OperationRecord) -> None:
        """Store one mutation.

        Note:
            Implementations may be bounded; older records may be evicted.
        """
        ...

    def records(
        self, partition: int | None = None, table: int | None = None
    ) -> list[OperationRecord]:
        """Get stored records in order, optionally filtered by table."""
        ...

    def clear(self) -> None:
        """Clear all stored records."""
        ...

    @property
    def record_count(self) -> int:
        """Number of records currently stored."""
        ...
