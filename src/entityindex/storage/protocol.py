"""Storage protocol for swappable backends.

The index keeps its three maps in a namespaced key-value store, enabling:
- Local in-memory (default)
- Persistent or remote stores supplied by the host

Usage:
    storage = LocalStorage()
    index = Index(storage=storage)
"""

from __future__ import annotations

from typing import Any, Protocol

StorageAddress = tuple[int, ...]
"""Address of a value inside a namespace, e.g. (partition, table, key)."""


class Storage(Protocol):
    """Abstract key-value interface. Implementations handle actual data."""

    def get(self, namespace: str, address: StorageAddress) -> Any | None:
        """Get value stored at address, or None if absent."""
        ...

    def contains(self, namespace: str, address: StorageAddress) -> bool:
        """Check if address holds a value."""
        ...

    def apply_updates(
        self,
        sets: dict[str, dict[StorageAddress, Any]],
        deletes: dict[str, list[StorageAddress]],
    ) -> None:
        """Apply batched changes as one unit. Sets first, then deletes.

        Deleting an absent address is a no-op.
        """
        ...

    def snapshot(self) -> bytes:
        """Serialize entire storage state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...

    # Async variants for remote storage backends

    async def get_async(self, namespace: str, address: StorageAddress) -> Any | None:
        """Get value (async variant for remote storage)."""
        ...

    async def apply_updates_async(
        self,
        sets: dict[str, dict[StorageAddress, Any]],
        deletes: dict[str, list[StorageAddress]],
    ) -> None:
        """Apply batched changes asynchronously."""
        ...
