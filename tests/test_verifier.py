"""Tests for index search and verification."""

from __future__ import annotations

import pytest

from symindex.config import IndexNode, IndexTable
from symindex.errors import VerificationError
from symindex.index.builder import build_index
from symindex.index.hasher import calc_hash
from symindex.index.verifier import max_depth, search, search_depth, verify_table
from symindex.vocabulary import BUILTIN_SYMBOLS


class TestSearch:
    def test_finds_every_builtin(self):
        table = build_index(BUILTIN_SYMBOLS)
        for sym in BUILTIN_SYMBOLS:
            position = search(table, sym)
            assert position is not None
            assert table[position].text == sym

    def test_missing_symbol(self):
        table = build_index(["new", "class", "to_s"])
        assert search(table, "inspect") is None

    def test_empty_table(self):
        assert search(IndexTable(), "new") is None
        assert search_depth(IndexTable(), "new") == 0

    def test_hash_match_requires_text_match(self):
        # "BQ" shares the hash of "Ab" but is not stored
        table = build_index(["Ab", "new"])
        assert search(table, "Ab") is not None
        assert search(table, "BQ") is None

    def test_table_lookup_delegates(self):
        table = build_index(["new", "class", "to_s"])
        assert table.lookup("class") == 2
        assert table.lookup("dup") is None

    def test_search_depth(self):
        table = build_index(["new", "class", "to_s"])
        assert search_depth(table, "new") == 1
        assert search_depth(table, "class") == 2
        assert search_depth(table, "to_s") == 2

    def test_cycle_terminates(self):
        table = IndexTable([
            IndexNode(hash=10, right=1, text="x"),
            IndexNode(hash=20, right=1, text="y"),
        ])
        assert search(table, "zzzz") is None


class TestMaxDepth:
    def test_empty(self):
        assert max_depth(IndexTable()) == 0

    def test_single(self):
        assert max_depth(build_index(["new"])) == 1

    def test_three(self):
        assert max_depth(build_index(["new", "class", "to_s"])) == 2


class TestVerifyTable:
    def test_empty_vocabulary_passes(self):
        verify_table(build_index([]), [])

    def test_builtin_vocabulary_passes(self):
        verify_table(build_index(BUILTIN_SYMBOLS), BUILTIN_SYMBOLS)

    def test_dropped_symbol_fails(self):
        table = IndexTable([IndexNode(hash=calc_hash("new"), text="new")])
        with pytest.raises(VerificationError) as exc:
            verify_table(table, ["new", "class"])
        assert exc.value.symbol == "class"
        assert "'class'" in str(exc.value)

    def test_misordered_tree_fails(self):
        # "class" hashes above "new" but sits on the left branch
        table = IndexTable([
            IndexNode(hash=calc_hash("new"), left=1, text="new"),
            IndexNode(hash=calc_hash("class"), text="class"),
        ])
        with pytest.raises(VerificationError) as exc:
            verify_table(table, ["new", "class"])
        assert exc.value.symbol == "class"


class TestMalformedTables:
    def test_cyclic_table_fails_verification(self):
        table = IndexTable([
            IndexNode(hash=calc_hash("a"), right=1, text="a"),
            IndexNode(hash=calc_hash("b"), right=1, text="b"),
        ])
        with pytest.raises(VerificationError) as exc:
            verify_table(table, ["a", "b"])
        assert exc.value.details["position"] == 1
        assert exc.value.details["child"] == 1

    def test_cyclic_table_max_depth_fails(self):
        table = IndexTable([
            IndexNode(hash=calc_hash("a"), right=1, text="a"),
            IndexNode(hash=calc_hash("b"), right=1, text="b"),
        ])
        with pytest.raises(VerificationError):
            max_depth(table)

    def test_dangling_offset_fails_verification(self):
        table = IndexTable([
            IndexNode(hash=calc_hash("a"), right=9, text="a"),
            IndexNode(hash=calc_hash("b"), text="b"),
        ])
        with pytest.raises(VerificationError) as exc:
            verify_table(table, ["a"])
        assert "invalid child offset 9" in str(exc.value)

    def test_dangling_offset_search_returns_none(self):
        table = IndexTable([
            IndexNode(hash=calc_hash("a"), right=9, text="a"),
            IndexNode(hash=calc_hash("b"), text="b"),
        ])
        assert search(table, "zzzz") is None

    def test_child_before_parent_fails(self):
        table = IndexTable([
            IndexNode(hash=calc_hash("new"), left=2, text="new"),
            IndexNode(hash=calc_hash("to_s"), text="to_s"),
            IndexNode(hash=calc_hash("class"), right=1, text="class"),
        ])
        with pytest.raises(VerificationError):
            verify_table(table, ["new"])
