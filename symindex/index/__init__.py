"""Hashing, tree construction and verification of the symbol index."""

from symindex.index.builder import build_index, build_table, detect_collisions
from symindex.index.hasher import calc_hash
from symindex.index.verifier import max_depth, search, search_depth, verify_table

__all__ = [
    "build_index",
    "build_table",
    "calc_hash",
    "detect_collisions",
    "max_depth",
    "search",
    "search_depth",
    "verify_table",
]
