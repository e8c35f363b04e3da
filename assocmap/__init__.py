"""assocmap: Mutable map over an immutable association list."""

from .assoc import (
    EMPTY,
    AssocList,
    Empty,
    Node,
    cons,
    contains_key,
    from_pairs,
    get_value,
    length,
    without_key,
)
from .errors import KeyNotFound
from .factory import create_mutable_map, mutable_map
from .map import AssocMap, CompactingAssocMap, HashMap, MutableMap, Synchronized

__all__ = [
    "EMPTY",
    "AssocList",
    "AssocMap",
    "CompactingAssocMap",
    "Empty",
    "HashMap",
    "KeyNotFound",
    "MutableMap",
    "Node",
    "Synchronized",
    "cons",
    "contains_key",
    "create_mutable_map",
    "from_pairs",
    "get_value",
    "length",
    "mutable_map",
    "without_key",
]
