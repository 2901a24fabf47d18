"""In-memory caches for derived extraction results."""
from __future__ import annotations

import threading
from collections import OrderedDict
from hashlib import sha256
from typing import Any, Hashable

_KEY_SEPARATOR = "\x1f"


def make_cache_key(kind: str, *parts: str | None) -> str:
    """Build a cache key from the operation kind and a digest of ``parts``.

    The digest covers the whole content, so two articles that only share a
    prefix never collide.
    """

    digest = sha256()
    for part in parts:
        digest.update((part or "").encode("utf-8"))
        digest.update(_KEY_SEPARATOR.encode("utf-8"))
    return f"{kind}:{digest.hexdigest()}"


class LRUExtractionCache:
    """Bounded least-recently-used cache safe to share between threads."""

    def __init__(self, capacity: int = 1024) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable) -> Any | None:
        with self._lock:
            try:
                value = self._entries[key]
            except KeyError:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self._capacity:
                self._entries.popitem(last=False)

    def pop(self, key: Hashable) -> Any | None:
        with self._lock:
            return self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class NullExtractionCache:
    """Cache that never stores anything, forcing every call to recompute."""

    def get(self, key: Hashable) -> Any | None:
        return None

    def set(self, key: Hashable, value: Any) -> None:
        return None


__all__ = ["LRUExtractionCache", "NullExtractionCache", "make_cache_key"]
