"""Association-list map that unlinks shadowed entries."""

from typing import TypeVar

from ..assoc import cons, without_key
from .assoc import AssocMap

V = TypeVar("V")


class CompactingAssocMap(AssocMap[V]):
    """An ``AssocMap`` whose list holds one node per distinct key.

    ``set()`` of an existing key rebuilds the prefix in front of the old
    node without it, so memory stays bounded by the number of keys.
    Lookups are still linear scans.
    """

    def set(self, key: str, value: V) -> bool:
        replaced = self.contains_key(key)
        tail = without_key(key, self._data) if replaced else self._data
        self._data = cons(key, value, tail)
        return replaced
