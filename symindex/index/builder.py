"""Collision detection and balanced tree construction."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from symindex.config import SENTINEL, IndexNode, IndexTable
from symindex.errors import HashCollisionError
from symindex.index.hasher import calc_hash

logger = logging.getLogger(__name__)


def detect_collisions(symbols: Iterable[str]) -> list[tuple[int, str]]:
    """Hash every symbol and fail on the first pair sharing a hash.

    Runs over the whole vocabulary before any tree is built. Repeats of the
    same name are not collisions; only the first occurrence is kept.

    Returns:
        (hash, text) pairs in vocabulary order.

    Raises:
        HashCollisionError: two distinct symbols hash to the same value.
    """
    seen: dict[int, str] = {}
    pairs: list[tuple[int, str]] = []
    for text in symbols:
        h = calc_hash(text)
        existing = seen.get(h)
        if existing is not None:
            if existing == text:
                continue
            raise HashCollisionError(existing, text, h)
        seen[h] = text
        pairs.append((h, text))

    logger.debug(f"Hashed {len(pairs)} symbols without collision")
    return pairs


def _place(run: list[tuple[int, str]], nodes: list[IndexNode | None]) -> int:
    """Append the subtree for a sorted run in pre-order; return its root position."""
    if not run:
        return SENTINEL

    mid = len(run) // 2
    h, text = run[mid]
    # Reserve the slot before the subtrees are laid out behind it.
    position = len(nodes)
    nodes.append(None)

    left = _place(run[:mid], nodes)
    right = _place(run[mid + 1:], nodes)
    nodes[position] = IndexNode(hash=h, left=left, right=right, text=text)
    return position


def build_table(pairs: Iterable[tuple[int, str]]) -> IndexTable:
    """Build a balanced index from collision-free (hash, text) pairs.

    The pairs are sorted by hash and split at the median recursively, so the
    two branches of every node differ in size by at most one. Nodes are laid
    out depth-first in pre-order, which puts the root at position 0 and every
    child after its parent.
    """
    ordered = sorted(pairs, key=lambda pair: pair[0])
    nodes: list[IndexNode | None] = []
    _place(ordered, nodes)
    return IndexTable([node for node in nodes if node is not None])


def build_index(symbols: Iterable[str]) -> IndexTable:
    """Check ``symbols`` for collisions and build their index."""
    return build_table(detect_collisions(symbols))
