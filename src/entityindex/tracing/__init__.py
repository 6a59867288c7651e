"""Tracing infrastructure for recording index mutations.

Usage:
    from entityindex.tracing import InMemoryJournal, OperationRecord

    journal = InMemoryJournal(max_records=100)
    index = Index(journal=journal)

    # Or implement OperationJournal for your own backend
    class MyJournal:
        def record(self, record: OperationRecord) -> None:
            ...
"""

from entityindex.tracing.memory import InMemoryJournal
from entityindex.tracing.models import OperationKind, OperationRecord
from entityindex.tracing.protocol import OperationJournal

__all__ = [
    "OperationJournal",
    "OperationRecord",
    "OperationKind",
    "InMemoryJournal",
]
