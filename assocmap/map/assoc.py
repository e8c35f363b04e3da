"""Association-list-backed mutable map."""

import logging
from typing import TypeVar

from ..assoc import EMPTY, AssocList, cons, contains_key, get_value
from .base import MutableMap

V = TypeVar("V")

logger = logging.getLogger(__name__)


class AssocMap(MutableMap[V]):
    """A mutable map holding the head of an immutable association list.

    ``set()`` prepends a node and never unlinks the one it shadows, so
    repeated sets of the same key grow the list until ``clear()``.
    """

    def __init__(self) -> None:
        self._data: AssocList[V] = EMPTY

    @property
    def data(self) -> AssocList[V]:
        """The current list head."""
        return self._data

    def contains_key(self, key: str) -> bool:
        return contains_key(key, self._data)

    def get_val(self, key: str) -> V:
        return get_value(key, self._data)

    def set(self, key: str, value: V) -> bool:
        replaced = self.contains_key(key)
        self._data = cons(key, value, self._data)
        return replaced

    def clear(self) -> None:
        logger.debug("Clearing %s", type(self).__name__)
        self._data = EMPTY
