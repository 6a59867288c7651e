"""Index identity: table addresses and per-entity reverse records."""

from entityindex.core.identity.models import EntityRecord, IndexKey

__all__ = [
    "IndexKey",
    "EntityRecord",
]
