from __future__ import annotations

import threading


class CollectionLockRegistry:
    """
    Provides a stable lock per collection name to avoid global contention.

    The guard is only held while looking up or inserting a lock, never while
    the caller works under the returned lock. Entries are never removed.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, collection: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = threading.Lock()
                self._locks[collection] = lock
            return lock

    def __contains__(self, collection: object) -> bool:
        with self._guard:
            return collection in self._locks

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
