"""Fatal generation-time conditions.

Every error here aborts the run before a table is emitted.
"""

from __future__ import annotations

from typing import Any


class IndexGenerationError(Exception):
    """Base class for errors that stop index generation."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class HashCollisionError(IndexGenerationError):
    """Two distinct symbols share a hash value."""

    def __init__(self, first: str, second: str, hash_value: int) -> None:
        super().__init__(
            f"Hash collision detected: {first!r} and {second!r} both hash to 0x{hash_value:04x}",
            {"first": first, "second": second, "hash": hash_value},
        )
        self.first = first
        self.second = second
        self.hash_value = hash_value


class VerificationError(IndexGenerationError):
    """The built table is malformed or misses a vocabulary symbol."""

    def __init__(self, symbol: str | None, message: str | None = None, **details: Any) -> None:
        if message is None:
            message = f"Verification failed: {symbol!r} not found in index"
        super().__init__(message, {"symbol": symbol, **details})
        self.symbol = symbol

    @classmethod
    def bad_offset(cls, position: int, child: int) -> VerificationError:
        return cls(
            None,
            f"Verification failed: node {position} has invalid child offset {child}",
            position=position,
            child=child,
        )


class OffsetOverflowError(IndexGenerationError):
    """The table has more nodes than its child offsets can address."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Index has {size} nodes; offsets only address {limit}",
            {"size": size, "limit": limit},
        )
        self.size = size
        self.limit = limit


class VocabularyError(IndexGenerationError):
    """The vocabulary source could not be read."""
