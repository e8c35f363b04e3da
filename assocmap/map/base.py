"""Abstract mutable map interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")


class MutableMap(ABC, Generic[V]):
    """Mutable map from string keys to values of type ``V``.

    Lookups of absent keys raise ``KeyNotFound``; they never return a
    sentinel. There is no removal, enumeration or size query.
    """

    @abstractmethod
    def contains_key(self, key: str) -> bool:
        """Check if key exists in the map."""

    @abstractmethod
    def get_val(self, key: str) -> V:
        """Get the value most recently set for key.

        Raises:
            KeyNotFound: If key was never set since the last ``clear()``.
        """

    @abstractmethod
    def set(self, key: str, value: V) -> bool:
        """Associate value with key.

        Returns True if key already had a value, False otherwise.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove all key-value pairs from the map."""
