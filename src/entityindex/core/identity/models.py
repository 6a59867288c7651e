"""Index identity models.

Usage:
    index_key = IndexKey(partition=0, table=69)
    record = EntityRecord(key=1, position=0)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IndexKey:
    """Identifies one independent index instance.

    Partitions and tables never observe each other's data. All three
    index maps are addressed by this pair.
    """

    partition: int = 0
    table: int = 0

    def __hash__(self) -> int:
        return hash((self.partition, self.table))

    def bucket(self, key: int) -> tuple[int, int, int]:
        """Storage address of the bucket for `key` in this table.

        Returns:
            (partition, table, key) tuple.
        """
        return (self.partition, self.table, key)

    def entity(self, entity: int) -> tuple[int, int, int]:
        """Storage address of an entity's reverse records in this table.

        Returns:
            (partition, table, entity) tuple.
        """
        return (self.partition, self.table, entity)


@dataclass(frozen=True, slots=True)
class EntityRecord:
    """Where an entity currently lives inside its table."""

    key: int
    position: int
