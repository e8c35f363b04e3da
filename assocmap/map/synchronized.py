"""Lock-guarded wrapper for sharing a map across threads."""

import threading
from typing import TypeVar

from .base import MutableMap

V = TypeVar("V")


class Synchronized(MutableMap[V]):
    """Forwards every operation to a wrapped map under a single lock.

    The membership check and the write in ``set()`` happen under the
    same lock acquisition, so concurrent sets of a fresh key report
    ``False`` exactly once.
    """

    def __init__(self, inner: MutableMap[V]) -> None:
        self.inner = inner
        self._lock = threading.Lock()

    def contains_key(self, key: str) -> bool:
        with self._lock:
            return self.inner.contains_key(key)

    def get_val(self, key: str) -> V:
        with self._lock:
            return self.inner.get_val(key)

    def set(self, key: str, value: V) -> bool:
        with self._lock:
            return self.inner.set(key, value)

    def clear(self) -> None:
        with self._lock:
            self.inner.clear()
