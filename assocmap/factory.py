"""Map factory functions."""

import logging
from typing import Any, Literal

from .map.assoc import AssocMap
from .map.base import MutableMap

logger = logging.getLogger(__name__)


def create_mutable_map() -> MutableMap[Any]:
    """Create a fresh, empty association-list map."""
    return AssocMap()


def mutable_map(
    kind: Literal["assoc", "compacting", "hash"] = "assoc",
    *,
    synchronized: bool = False,
) -> MutableMap[Any]:
    """Create a MutableMap with the given backing.

    Args:
        kind: ``"assoc"`` (default) for an ``AssocMap`` that keeps
            shadowed entries, ``"compacting"`` for a
            ``CompactingAssocMap``, or ``"hash"`` for a dict-backed
            ``HashMap``.
        synchronized: Wrap the map in ``Synchronized`` so it can be
            shared across threads.

    Returns:
        A new, empty ``MutableMap``.
    """
    if kind == "assoc":
        result: MutableMap[Any] = AssocMap()
    elif kind == "compacting":
        from .map.compacting import CompactingAssocMap

        result = CompactingAssocMap()
    elif kind == "hash":
        from .map.hashed import HashMap

        result = HashMap()
    else:
        raise ValueError(f"Unknown kind: {kind!r}")

    if synchronized:
        from .map.synchronized import Synchronized

        result = Synchronized(result)

    logger.debug("Created %s map (synchronized=%s)", kind, synchronized)
    return result
