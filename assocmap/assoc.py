"""Immutable association list primitives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar, Union

from .errors import KeyNotFound

V = TypeVar("V")


class Empty:
    """Terminal marker of an association list."""

    _instance: Empty | None = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


@dataclass(frozen=True, eq=False, repr=False)
class Node(Generic[V]):
    """A key-value pair prepended to a tail list.

    Nodes compare by identity; the tail is not part of the repr.
    """

    key: str
    value: V
    tail: AssocList[V]

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


AssocList = Union[Empty, Node[V]]


def cons(key: str, value: V, tail: AssocList[V]) -> Node[V]:
    """Prepend ``(key, value)`` to ``tail``."""
    return Node(key, value, tail)


def contains_key(key: str, alist: AssocList[V]) -> bool:
    """True if any node in ``alist`` carries ``key``."""
    node = alist
    while isinstance(node, Node):
        if node.key == key:
            return True
        node = node.tail
    return False


def get_value(key: str, alist: AssocList[V]) -> V:
    """Value of the first node carrying ``key``.

    Raises:
        KeyNotFound: If no node carries ``key``.
    """
    node = alist
    while isinstance(node, Node):
        if node.key == key:
            return node.value
        node = node.tail
    raise KeyNotFound(key)


def without_key(key: str, alist: AssocList[V]) -> AssocList[V]:
    """Copy of ``alist`` with every node for ``key`` dropped.

    The suffix after the last matching node is shared with ``alist``.
    Returns ``alist`` itself when ``key`` is absent.
    """
    kept: list[Node[V]] = []
    pending: list[Node[V]] = []
    shared: AssocList[V] = alist
    node = alist
    while isinstance(node, Node):
        if node.key == key:
            kept.extend(pending)
            pending = []
            shared = node.tail
        else:
            pending.append(node)
        node = node.tail
    if shared is alist:
        return alist
    result = shared
    for kept_node in reversed(kept):
        result = cons(kept_node.key, kept_node.value, result)
    return result


def length(alist: AssocList) -> int:
    """Number of nodes, shadowed duplicates included."""
    count = 0
    node = alist
    while isinstance(node, Node):
        count += 1
        node = node.tail
    return count


def from_pairs(pairs: Iterable[tuple[str, V]]) -> AssocList[V]:
    """Build a list as if each pair had been set in order."""
    result: AssocList[V] = EMPTY
    for key, value in pairs:
        result = cons(key, value, result)
    return result
