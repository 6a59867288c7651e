"""entityindex: secondary index for entity-storage systems.

Usage:
    from entityindex import Index

    index = Index()
    index.create(0, 69, 420, 1)
    index.get(0, 69, 1)        # [420]
    index.exists(0, 69, 420)   # True
    index.delete(0, 69, 420)
"""

__version__ = "0.1.0"

# Core primitives
from entityindex.core import (
    Copy,
    EntityRecord,
    IndexKey,
)

# Configuration
from entityindex.config import IndexSettings

# Index
from entityindex.index import (
    Index,
    IndexWarning,
    TableIndex,
)

# Storage
from entityindex.storage import (
    LocalStorage,
    Storage,
)

# Tracing (optional)
from entityindex.tracing import (
    InMemoryJournal,
    OperationJournal,
    OperationRecord,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "IndexKey",
    "EntityRecord",
    "Copy",
    # Config
    "IndexSettings",
    # Index
    "Index",
    "IndexWarning",
    "TableIndex",
    # Storage
    "Storage",
    "LocalStorage",
    # Tracing
    "OperationJournal",
    "OperationRecord",
    "InMemoryJournal",
]
