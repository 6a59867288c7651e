"""Data models for tracing infrastructure.

Records are plain data and convert to JSON-serializable dicts, so any
journal backend can persist them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

OperationKind = Literal["create", "delete"]


@dataclass(slots=True)
class OperationRecord:
    """One effective mutation of the index.

    No-op calls (duplicate create, delete of an absent entity) are never
    recorded.

    Attributes:
        op: "create" or "delete".
        partition: Partition of the affected table.
        table: Table the entity is filed in.
        entity: Entity that was filed or removed.
        key: Key of the bucket that changed.
        position: Slot the entity occupied (after create, before delete).
        timestamp: Unix timestamp of the mutation.
        moved: For deletes, the entity swapped into the freed slot, if any.

    Example:
        record = OperationRecord(
            op="delete",
            partition=0,
            table=69,
            entity=10,
            key=1,
            position=0,
            timestamp=1704067200.0,
            moved=30,
        )
    """

    op: OperationKind
    partition: int
    table: int
    entity: int
    key: int
    position: int
    timestamp: float
    moved: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "op": self.op,
            "partition": self.partition,
            "table": self.table,
            "entity": self.entity,
            "key": self.key,
            "position": self.position,
            "timestamp": self.timestamp,
        }
        if self.moved is not None:
            result["moved"] = self.moved
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OperationRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            op=data["op"],
            partition=data["partition"],
            table=data["table"],
            entity=data["entity"],
            key=data["key"],
            position=data["position"],
            timestamp=data["timestamp"],
            moved=data.get("moved"),
        )
