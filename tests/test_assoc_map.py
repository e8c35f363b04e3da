"""Tests for the list structure behind AssocMap and CompactingAssocMap."""

import logging

from assocmap import EMPTY, AssocMap, CompactingAssocMap, HashMap
from assocmap.assoc import Node, length


class TestAssocMapStorage:
    def test_starts_empty(self):
        assert AssocMap().data is EMPTY

    def test_set_prepends(self):
        m = AssocMap()
        m.set("a", 1)
        first = m.data
        m.set("b", 2)
        assert isinstance(m.data, Node)
        assert m.data.key == "b"
        assert m.data.tail is first

    def test_keeps_shadowed_duplicates(self):
        m = AssocMap()
        for i in range(5):
            m.set("k", i)
        assert length(m.data) == 5
        assert m.get_val("k") == 4

    def test_shadowed_value_still_linked(self):
        m = AssocMap()
        m.set("k", "old")
        m.set("k", "new")
        assert isinstance(m.data, Node)
        assert m.data.value == "new"
        assert m.data.tail.value == "old"  # type: ignore[union-attr]

    def test_clear_drops_chain(self):
        m = AssocMap()
        m.set("a", 1)
        m.set("a", 2)
        m.clear()
        assert m.data is EMPTY

    def test_old_head_is_unchanged_by_later_sets(self):
        m = AssocMap()
        m.set("a", 1)
        snapshot = m.data
        m.set("a", 2)
        m.clear()
        assert isinstance(snapshot, Node)
        assert snapshot.value == 1
        assert snapshot.tail is EMPTY


class TestCompactingAssocMap:
    def test_one_node_per_key(self):
        m = CompactingAssocMap()
        for i in range(5):
            m.set("k", i)
        m.set("j", "other")
        assert length(m.data) == 2
        assert m.get_val("k") == 4

    def test_overwritten_key_moves_to_head(self):
        m = CompactingAssocMap()
        m.set("a", 1)
        m.set("b", 2)
        m.set("c", 3)
        m.set("a", 4)
        keys = []
        node = m.data
        while isinstance(node, Node):
            keys.append(node.key)
            node = node.tail
        assert keys == ["a", "c", "b"]

    def test_new_key_shares_previous_list(self):
        m = CompactingAssocMap()
        m.set("a", 1)
        before = m.data
        m.set("b", 2)
        assert isinstance(m.data, Node)
        assert m.data.tail is before


class TestClearLogging:
    def test_assoc_map_logs_clear(self, caplog):
        m = AssocMap()
        m.set("k", 1)
        with caplog.at_level(logging.DEBUG, logger="assocmap.map.assoc"):
            m.clear()
        assert "Clearing AssocMap" in caplog.text

    def test_compacting_logs_own_name(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="assocmap.map.assoc"):
            CompactingAssocMap().clear()
        assert "Clearing CompactingAssocMap" in caplog.text

    def test_hash_map_logs_clear(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="assocmap.map.hashed"):
            HashMap().clear()
        assert "Clearing HashMap" in caplog.text
