"""Storage backends."""

from entityindex.storage.local import LocalStorage
from entityindex.storage.protocol import Storage, StorageAddress

__all__ = [
    "Storage",
    "StorageAddress",
    "LocalStorage",
]
