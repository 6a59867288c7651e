"""Secondary index over entity storage.

Architecture Note:
    index/ is the stateful service layer. It owns no data itself; the three
    maps live in a Storage backend and every write reaches it as one batch.
"""

from entityindex.index.index import (
    BUCKETS,
    ENTITY_KEY,
    ENTITY_POSITION,
    Index,
    IndexWarning,
)
from entityindex.index.table import TableIndex

__all__ = [
    "Index",
    "IndexWarning",
    "TableIndex",
    "BUCKETS",
    "ENTITY_KEY",
    "ENTITY_POSITION",
]
