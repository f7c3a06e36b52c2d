"""16-bit multiplicative string hash.

The runtime that walks the generated table recomputes this hash on its own,
so the multiplier and the 16-bit wraparound must stay exactly as they are.
"""

from __future__ import annotations

HASH_MULTIPLIER = 17
HASH_MASK = 0xFFFF


def calc_hash(data: str | bytes) -> int:
    """Hash a symbol name. ``str`` input is hashed over its UTF-8 bytes."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = 0
    for b in data:
        h = (h * HASH_MULTIPLIER + b) & HASH_MASK
    return h
