"""Core primitives: stateless identity types and aliases.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For stateful services, see index/, storage/, and tracing/.
"""

from entityindex.core.identity import EntityRecord, IndexKey
from entityindex.core.types import Copy

__all__ = [
    "IndexKey",
    "EntityRecord",
    "Copy",
]
