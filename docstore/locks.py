from __future__ import annotations

import threading


class CollectionLockRegistry:
    """
    Provides a stable lock per collection name so writers to unrelated
    collections never contend with each other.

    Entries are created on first use and kept for the registry's lifetime.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, collection: str) -> threading.Lock:
        lock = self._locks.get(collection)
        if lock is not None:
            return lock
        with self._guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.Lock()
                self._locks[collection] = lock
            return lock

    def __contains__(self, collection: object) -> bool:
        return collection in self._locks

    def __len__(self) -> int:
        return len(self._locks)
