"""Least-recently-used caches, plain and thread safe."""

from __future__ import annotations

import threading
from collections import OrderedDict
from concurrent.futures import Future
from enum import Enum, auto
from typing import Any, Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class AccessStatus(Enum):
    """Outcome of a cache access."""

    HIT = auto()   # key was found in the cache
    PUT = auto()   # key was missing and has been inserted by get_or_put
    MISS = auto()  # key was missing; a get failed


class AccessResult(Generic[V]):
    """What a cache access found, with its status."""

    __slots__ = ("status", "_stored")

    def __init__(self, stored: Any = None, status: AccessStatus = AccessStatus.MISS):
        self.status = status
        self._stored = stored

    def hit(self) -> bool:
        return self.status is AccessStatus.HIT

    def miss(self) -> bool:
        return not self.hit()

    def value(self) -> V:
        """The value found or inserted; raises KeyError after a failed get."""
        if self.status is AccessStatus.MISS:
            raise KeyError("There is no such key in cache")
        return self._stored

    def __repr__(self) -> str:
        return f"AccessResult(status={self.status.name})"


class LruCache(Generic[K, V]):
    """A bounded mapping that evicts the least recently used key."""

    def __init__(self, max_size: int):
        self._max_size = max_size
        self._items: OrderedDict[K, V] = OrderedDict()

    def get_or_put(self, key: K, value: V) -> AccessResult[V]:
        """Return the cached value for ``key``, or store ``value`` and report PUT."""
        if key in self._items:
            self._items.move_to_end(key)
            return AccessResult(self._items[key], AccessStatus.HIT)
        self._put_missing(key, value)
        return AccessResult(value, AccessStatus.PUT)

    def put(self, key: K, value: V) -> None:
        if key in self._items:
            self._items.move_to_end(key)
            self._items[key] = value
        else:
            self._put_missing(key, value)

    def get(self, key: K) -> AccessResult[V]:
        if key not in self._items:
            return AccessResult()
        self._items.move_to_end(key)
        return AccessResult(self._items[key], AccessStatus.HIT)

    def drop(self, key: K) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._items.pop(key, _ABSENT) is not _ABSENT

    def exists(self, key: K) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def _put_missing(self, key: K, value: V) -> None:
        self._items[key] = value
        if len(self._items) > self._max_size:
            self._items.popitem(last=False)


_ABSENT = object()


class ConcurrentCache(Generic[K, V]):
    """Thread-safe LRU cache that computes missing values outside the lock.

    Concurrent requests for a key being computed wait for that computation
    instead of running it again.
    """

    def __init__(self, max_entries: int):
        self._impl: LruCache[K, Future] = LruCache(max_entries)
        self._lock = threading.Lock()

    def get_or_put(self, key: K, factory: Callable[[], V]) -> V:
        """Return the value for ``key``, calling ``factory()`` on a miss."""
        placeholder: Future = Future()
        with self._lock:
            result = self._impl.get_or_put(key, placeholder)
        if result.miss():
            try:
                value = factory()
            except BaseException as exc:
                self.drop(key)
                placeholder.set_exception(exc)
                raise
            placeholder.set_result(value)
        return result.value().result()

    def drop(self, key: K) -> bool:
        with self._lock:
            return self._impl.drop(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._impl)