"""TableIndex: an Index bound to one (partition, table)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from entityindex.core.identity import EntityRecord, IndexKey
from entityindex.core.types import Copy

if TYPE_CHECKING:
    from entityindex.index.index import Index


class TableIndex:
    """Convenient wrapper for repeated operations on a single table.

    Provides dict-style access with syntax like:
    handle[key] -> entities, entity in handle, del handle[entity].

    Args:
        index: Index owning the data.
        index_key: Table this handle is bound to.
    """

    def __init__(self, index: Index, index_key: IndexKey):
        self._index = index
        self._index_key = index_key

    @property
    def id(self) -> IndexKey:
        """Get the (partition, table) this handle wraps."""
        return self._index_key

    def create(self, entity: int, key: int) -> None:
        self._index.create(self._index_key.partition, self._index_key.table, entity, key)

    def delete(self, entity: int) -> None:
        self._index.delete(self._index_key.partition, self._index_key.table, entity)

    def exists(self, entity: int) -> bool:
        return self._index.exists(self._index_key.partition, self._index_key.table, entity)

    def get(self, key: int) -> Copy[list[int]]:
        return self._index.get(self._index_key.partition, self._index_key.table, key)

    def key_of(self, entity: int) -> int | None:
        return self._index.key_of(self._index_key.partition, self._index_key.table, entity)

    def record(self, entity: int) -> EntityRecord | None:
        return self._index.record(self._index_key.partition, self._index_key.table, entity)

    def count(self, key: int) -> int:
        return self._index.count(self._index_key.partition, self._index_key.table, key)

    def __getitem__(self, key: int) -> Copy[list[int]]:
        """Entities under a key: handle[key] -> [entity, ...].

        Args:
            key: Grouping key to look up.

        Returns:
            Fresh list of entity ids, empty if the key holds nothing.
        """
        return self.get(key)

    def __delitem__(self, entity: int) -> None:
        """Remove entity from the table: del handle[entity].

        Args:
            entity: Entity to remove. Absent entities are ignored.
        """
        self.delete(entity)

    def __contains__(self, entity: object) -> bool:
        """Check if entity is indexed: entity in handle.

        Args:
            entity: Entity id to check.

        Returns:
            True if the entity is filed under any key of this table.
        """
        if not isinstance(entity, int):
            return False
        return self.exists(entity)

    def __repr__(self) -> str:
        return (
            f"TableIndex(partition={self._index_key.partition}, "
            f"table={self._index_key.table})"
        )
