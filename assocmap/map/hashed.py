"""Dict-backed mutable map."""

import logging
from typing import TypeVar

from ..errors import KeyNotFound
from .base import MutableMap

V = TypeVar("V")

logger = logging.getLogger(__name__)


class HashMap(MutableMap[V]):
    """A dict-backed map with the same contract as ``AssocMap``."""

    def __init__(self) -> None:
        self.memory: dict[str, V] = {}

    def contains_key(self, key: str) -> bool:
        return key in self.memory

    def get_val(self, key: str) -> V:
        try:
            return self.memory[key]
        except KeyError:
            raise KeyNotFound(key) from None

    def set(self, key: str, value: V) -> bool:
        replaced = key in self.memory
        self.memory[key] = value
        return replaced

    def clear(self) -> None:
        logger.debug("Clearing %s", type(self).__name__)
        self.memory.clear()
