"""Mutable map implementations."""

from .assoc import AssocMap
from .base import MutableMap
from .compacting import CompactingAssocMap
from .hashed import HashMap
from .synchronized import Synchronized

__all__ = ["AssocMap", "CompactingAssocMap", "HashMap", "MutableMap", "Synchronized"]
