"""Tree search and post-construction verification.

``search`` is the same walk the runtime performs over the emitted table:
compare hashes from the root down, and accept a node only when both the hash
and the full text match.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from symindex.config import SENTINEL, IndexTable
from symindex.errors import VerificationError
from symindex.index.hasher import calc_hash

logger = logging.getLogger(__name__)


def _walk(table: IndexTable, text: str) -> tuple[int | None, int]:
    """Return (position or None, number of nodes compared)."""
    if len(table) == 0:
        return None, 0

    h = calc_hash(text)
    position = SENTINEL
    steps = 0
    while True:
        node = table[position]
        steps += 1
        if node.hash == h and node.text == text:
            return position, steps
        position = node.left if h < node.hash else node.right
        # A path longer than the table means a cycle.
        if not SENTINEL < position < len(table) or steps >= len(table):
            return None, steps


def search(table: IndexTable, text: str) -> int | None:
    """Look up ``text``. Returns its table position or None if absent."""
    position, _ = _walk(table, text)
    return position


def search_depth(table: IndexTable, text: str) -> int:
    """Number of nodes compared while searching for ``text``."""
    _, steps = _walk(table, text)
    return steps


def check_structure(table: IndexTable) -> None:
    """Every child offset must point past its parent and inside the table.

    Pre-order layout always satisfies this, and it rules out cycles and
    dangling offsets.

    Raises:
        VerificationError: a node has an out-of-order or out-of-range child.
    """
    for position, node in enumerate(table):
        for child in (node.left, node.right):
            if child != SENTINEL and not position < child < len(table):
                raise VerificationError.bad_offset(position, child)


def max_depth(table: IndexTable) -> int:
    """Longest root-to-leaf path, counted in nodes."""
    check_structure(table)

    # Children sit after their parents, so heights fill in back to front.
    heights = [0] * len(table)
    for position in range(len(table) - 1, -1, -1):
        node = table[position]
        heights[position] = 1 + max(
            heights[child] if child != SENTINEL else 0
            for child in (node.left, node.right)
        )
    return heights[SENTINEL] if heights else 0


def verify_table(table: IndexTable, symbols: Iterable[str]) -> None:
    """Check the table layout, then search for every symbol.

    Raises:
        VerificationError: a child offset is malformed, or a symbol does not
            resolve to its own node.
    """
    check_structure(table)

    count = 0
    for text in symbols:
        if search(table, text) is None:
            raise VerificationError(text)
        count += 1

    logger.debug(f"Verified {count} symbols")
