"""Index: secondary index from grouping keys to entity ids.

Usage:
    index = Index()

    index.create(0, 69, 420, 1)       # file entity 420 under key 1
    index.get(0, 69, 1)               # [420]
    index.exists(0, 69, 420)          # True
    index.delete(0, 69, 420)          # no key needed

    # Bind a table once for repeated calls
    positions = index.table(0, 69)
    positions.create(1337, 2)
    1337 in positions                 # True
"""

from __future__ import annotations

import threading
import time
import warnings
from contextlib import AbstractContextManager, ExitStack, nullcontext
from typing import TYPE_CHECKING, Any

from entityindex.config import IndexSettings
from entityindex.core.identity import EntityRecord, IndexKey
from entityindex.core.types import Copy
from entityindex.index.table import TableIndex
from entityindex.storage.local import LocalStorage
from entityindex.storage.protocol import Storage, StorageAddress
from entityindex.tracing.memory import InMemoryJournal
from entityindex.tracing.models import OperationKind, OperationRecord

if TYPE_CHECKING:
    from entityindex.tracing.protocol import OperationJournal

BUCKETS = "buckets"
ENTITY_KEY = "entity_key"
ENTITY_POSITION = "entity_position"


class IndexWarning(UserWarning):
    """Caller misuse that the index absorbs instead of applying."""


class Index:
    """Multi-map from (partition, table, key) to an ordered bucket of entities.

    Alongside the buckets, two reverse maps record the key and the bucket
    offset of every indexed entity, so existence checks and deletes never
    scan buckets. Deletes swap the last entity of the bucket into the freed
    slot and shrink by one; bucket order after a delete is therefore not
    insertion order.

    Every operation is total: absent entities, keys and tables read back as
    empty and delete as a no-op.

    Args:
        storage: Backend holding the three maps (default LocalStorage).
        settings: Index configuration (default loaded from environment).
        journal: Receives a record for every effective mutation.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        settings: IndexSettings | None = None,
        journal: OperationJournal | None = None,
    ):
        self._storage: Storage = storage if storage is not None else LocalStorage()
        self._settings = settings if settings is not None else IndexSettings()
        if journal is None and self._settings.record_operations:
            journal = InMemoryJournal(max_records=self._settings.journal_size)
        self._journal = journal
        self._locks: tuple[threading.RLock, ...] = tuple(
            threading.RLock() for _ in range(self._settings.lock_stripes)
        )

    @property
    def storage(self) -> Storage:
        return self._storage

    @property
    def settings(self) -> IndexSettings:
        return self._settings

    @property
    def journal(self) -> OperationJournal | None:
        return self._journal

    def _guard(self, index_key: IndexKey) -> AbstractContextManager[Any]:
        """Lock serializing all operations on one (partition, table).

        Tables map onto a fixed pool of stripes, so arbitrary table ids never
        grow the pool. Tables sharing a stripe just serialize with each other.
        """
        if not self._settings.thread_safe:
            return nullcontext()
        return self._locks[hash(index_key) % len(self._locks)]

    def _trace(
        self,
        op: OperationKind,
        index_key: IndexKey,
        entity: int,
        key: int,
        position: int,
        moved: int | None = None,
    ) -> None:
        if self._journal is None:
            return
        self._journal.record(
            OperationRecord(
                op=op,
                partition=index_key.partition,
                table=index_key.table,
                entity=entity,
                key=key,
                position=position,
                timestamp=time.time(),
                moved=moved,
            )
        )

    def create(self, partition: int, table: int, entity: int, key: int) -> None:
        """File an entity under a key.

        Re-filing an entity under the key it already has is a no-op. Filing
        an entity that already lives under a different key of the same table
        is a caller error: nothing changes and an IndexWarning is emitted.

        Args:
            partition: Partition of the table.
            table: Table the entity belongs to.
            entity: Entity to file.
            key: Grouping key to file it under.
        """
        index_key = IndexKey(partition, table)
        entity_address = index_key.entity(entity)
        with self._guard(index_key):
            current = self._storage.get(ENTITY_KEY, entity_address)
            if current is not None:
                if current != key and self._settings.warn_on_refile:
                    warnings.warn(
                        f"create() ignored: entity {entity} is already filed under key "
                        f"{current} in table ({partition}, {table}). "
                        f"Delete it before filing it under key {key}.",
                        IndexWarning,
                        stacklevel=2,
                    )
                return

            bucket_address = index_key.bucket(key)
            bucket: list[int] = self._storage.get(BUCKETS, bucket_address) or []
            bucket.append(entity)
            position = len(bucket) - 1

            self._storage.apply_updates(
                sets={
                    BUCKETS: {bucket_address: bucket},
                    ENTITY_KEY: {entity_address: key},
                    ENTITY_POSITION: {entity_address: position},
                },
                deletes={},
            )
            self._trace("create", index_key, entity, key, position)

    def get(self, partition: int, table: int, key: int) -> Copy[list[int]]:
        """Entities filed under a key, in current bucket order.

        Returns:
            Fresh list of entity ids; empty if the key holds nothing.
        """
        index_key = IndexKey(partition, table)
        with self._guard(index_key):
            bucket = self._storage.get(BUCKETS, index_key.bucket(key))
        return list(bucket) if bucket else []

    def exists(self, partition: int, table: int, entity: int) -> bool:
        """Check if an entity is filed under any key of the table."""
        index_key = IndexKey(partition, table)
        with self._guard(index_key):
            return self._storage.contains(ENTITY_KEY, index_key.entity(entity))

    def delete(self, partition: int, table: int, entity: int) -> None:
        """Remove an entity from its table without knowing its key.

        The last entity of the bucket takes over the freed slot, then the
        bucket shrinks by one. Deleting an entity that is not indexed is a
        no-op.

        Args:
            partition: Partition of the table.
            table: Table the entity belongs to.
            entity: Entity to remove.
        """
        index_key = IndexKey(partition, table)
        entity_address = index_key.entity(entity)
        with self._guard(index_key):
            key = self._storage.get(ENTITY_KEY, entity_address)
            if key is None:
                return
            position: int = self._storage.get(ENTITY_POSITION, entity_address)

            bucket_address = index_key.bucket(key)
            bucket: list[int] = self._storage.get(BUCKETS, bucket_address) or []
            last = len(bucket) - 1

            sets: dict[str, dict[StorageAddress, Any]] = {}
            moved: int | None = None
            if position != last:
                moved = bucket[last]
                bucket[position] = moved
                sets[ENTITY_POSITION] = {index_key.entity(moved): position}
            bucket.pop()
            sets[BUCKETS] = {bucket_address: bucket}

            self._storage.apply_updates(
                sets=sets,
                deletes={
                    ENTITY_KEY: [entity_address],
                    ENTITY_POSITION: [entity_address],
                },
            )
            self._trace("delete", index_key, entity, key, position, moved)

    def record(self, partition: int, table: int, entity: int) -> EntityRecord | None:
        """Key and bucket offset of an entity, or None if not indexed."""
        index_key = IndexKey(partition, table)
        entity_address = index_key.entity(entity)
        with self._guard(index_key):
            key = self._storage.get(ENTITY_KEY, entity_address)
            if key is None:
                return None
            position = self._storage.get(ENTITY_POSITION, entity_address)
        return EntityRecord(key=key, position=position)

    def key_of(self, partition: int, table: int, entity: int) -> int | None:
        """Key an entity is filed under, or None if not indexed."""
        index_key = IndexKey(partition, table)
        with self._guard(index_key):
            return self._storage.get(ENTITY_KEY, index_key.entity(entity))

    def count(self, partition: int, table: int, key: int) -> int:
        """Number of entities filed under a key."""
        index_key = IndexKey(partition, table)
        with self._guard(index_key):
            bucket = self._storage.get(BUCKETS, index_key.bucket(key))
        return len(bucket) if bucket else 0

    def table(self, partition: int, table: int) -> TableIndex:
        """Handle bound to one (partition, table) for repeated operations."""
        return TableIndex(self, IndexKey(partition, table))

    def snapshot(self) -> bytes:
        """Serialize all index state through the storage backend."""
        return self._storage.snapshot()

    def restore(self, data: bytes) -> None:
        """Replace all index state with a previous snapshot().

        Holds every lock stripe, so no create or delete overlaps the swap.
        The attached journal is cleared: its records describe the replaced
        state, not the restored one.
        """
        with ExitStack() as stack:
            if self._settings.thread_safe:
                for lock in self._locks:
                    stack.enter_context(lock)
            self._storage.restore(data)
            if self._journal is not None:
                self._journal.clear()

    # Async variants - wrap the sync operations for hosts running an event loop

    async def create_async(self, partition: int, table: int, entity: int, key: int) -> None:
        """File an entity under a key (async wrapper)."""
        self.create(partition, table, entity, key)

    async def get_async(self, partition: int, table: int, key: int) -> Copy[list[int]]:
        """Entities filed under a key (async wrapper)."""
        return self.get(partition, table, key)

    async def exists_async(self, partition: int, table: int, entity: int) -> bool:
        """Check if an entity is indexed (async wrapper)."""
        return self.exists(partition, table, entity)

    async def delete_async(self, partition: int, table: int, entity: int) -> None:
        """Remove an entity from its table (async wrapper)."""
        self.delete(partition, table, entity)
