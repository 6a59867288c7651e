"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    storage = LocalStorage()
    index = Index(storage=storage)
"""

from __future__ import annotations

import copy as cp
import pickle  # nosec B403 - Used only for local snapshots, not untrusted input
from typing import Any

from entityindex.storage.protocol import StorageAddress


class LocalStorage:
    """Simple in-memory storage using nested dicts.

    Structure:
        _data[namespace][address] = value

    Values are copied on the way in and on the way out, so no caller ever
    holds a reference to a stored list.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[StorageAddress, Any]] = {}

    def get(self, namespace: str, address: StorageAddress) -> Any | None:
        """Get a value from a namespace.

        Args:
            namespace: Map name (e.g. "buckets").
            address: Address inside the namespace.

        Returns:
            Copy of the stored value or None if not present.
        """
        value = self._data.get(namespace, {}).get(address)
        if value is None:
            return None
        return cp.copy(value)

    def contains(self, namespace: str, address: StorageAddress) -> bool:
        """Check if a namespace holds a value at address.

        Args:
            namespace: Map name.
            address: Address inside the namespace.

        Returns:
            True if present, False otherwise.
        """
        return address in self._data.get(namespace, {})

    def apply_updates(
        self,
        sets: dict[str, dict[StorageAddress, Any]],
        deletes: dict[str, list[StorageAddress]],
    ) -> None:
        """Apply batched changes.

        Args:
            sets: Namespace -> address -> new value.
            deletes: Namespace -> addresses to remove.
        """
        # Sets
        for namespace, values in sets.items():
            target = self._data.setdefault(namespace, {})
            for address, value in values.items():
                target[address] = cp.copy(value)

        # Deletes
        for namespace, addresses in deletes.items():
            target = self._data.get(namespace)
            if target is None:
                continue
            for address in addresses:
                target.pop(address, None)

    def namespace_size(self, namespace: str) -> int:
        """Number of addresses stored in a namespace."""
        return len(self._data.get(namespace, {}))

    def snapshot(self) -> bytes:
        """Pickle entire state for serialization.

        Returns:
            Pickled bytes of storage state.
        """
        return pickle.dumps({"data": self._data})

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.
        """
        state = pickle.loads(data)  # nosec B301 - Only our own snapshots are restored
        self._data = state["data"]

    # Async variants - for LocalStorage these just wrap sync methods

    async def get_async(self, namespace: str, address: StorageAddress) -> Any | None:
        """Get a value (async wrapper for sync implementation)."""
        return self.get(namespace, address)

    async def apply_updates_async(
        self,
        sets: dict[str, dict[StorageAddress, Any]],
        deletes: dict[str, list[StorageAddress]],
    ) -> None:
        """Apply batched changes asynchronously (async wrapper)."""
        self.apply_updates(sets, deletes)
