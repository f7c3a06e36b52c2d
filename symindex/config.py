"""Core data types and configuration for symbol index generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

# Position 0 is both the root of the tree and the "no child" marker.
SENTINEL = 0

# Offsets are emitted as 8-bit fields.
MAX_NODES = 0x100


@dataclass(frozen=True)
class IndexNode:
    hash: int
    left: int = SENTINEL
    right: int = SENTINEL
    text: str = ""


class IndexTable:
    """Flattened binary search tree over symbol hashes.

    Children are referenced by their position in the same table. The node at
    position 0 is the root, so no child ever points there.
    """

    def __init__(self, nodes: list[IndexNode] | tuple[IndexNode, ...] = ()) -> None:
        self._nodes: tuple[IndexNode, ...] = tuple(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[IndexNode]:
        return iter(self._nodes)

    def __getitem__(self, position: int) -> IndexNode:
        return self._nodes[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexTable):
            return NotImplemented
        return self._nodes == other._nodes

    def __repr__(self) -> str:
        return f"IndexTable({len(self._nodes)} nodes)"

    @property
    def root(self) -> IndexNode | None:
        return self._nodes[SENTINEL] if self._nodes else None

    def texts(self) -> list[str]:
        """Return the stored symbol names in table order."""
        return [node.text for node in self._nodes]

    def lookup(self, text: str) -> int | None:
        """Return the position of ``text`` in the table, or None if absent."""
        from symindex.index.verifier import search

        return search(self, text)


@dataclass
class GeneratorConfig:
    vocabulary_path: str | None = None
    output_path: str | None = None
    output_format: str = "c"
    struct_name: str = "SYM_INDEX"
    table_name: str = "base_index"
    append: list[str] = field(default_factory=list)
    verbose: bool = False
    quiet: bool = False


@dataclass
class GenerationResult:
    table: IndexTable
    symbols: list[str] = field(default_factory=list)
    rendered: str = ""
    stats: dict[str, Any] = field(default_factory=dict)
    timings: dict[str, float] = field(default_factory=dict)
