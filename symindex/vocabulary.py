"""Symbol vocabularies: the built-in mruby/c set and file-based loading."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from symindex.errors import VocabularyError

logger = logging.getLogger(__name__)

BUILTIN_SYMBOLS: tuple[str, ...] = (
    "Object", "new", "!", "!=", "<=>", "===", "class", "dup", "block_given?",
    "is_a?", "kind_of?", "nil?", "p", "print", "puts", "raise", "object_id",
    "instance_methods", "instance_variables", "memory_statistics",
    "attr_reader", "attr_accessor", "sprintf", "printf", "inspect", "to_s",
    "Proc", "call", "NilClass", "to_i", "to_a", "to_h", "to_f", "TrueClass",
    "FalseClass", "Symbol", "all_symbols", "id2name", "to_sym", "Fixnum",
    "[]", "+@", "-@", "**", "%", "&", "|", "^", "~", "<<", ">>", "abs", "chr",
    "Float", "String", "+", "*", "size", "length", "[]=", "b", "clear",
    "chomp", "chomp!", "empty?", "getbyte", "index", "ord", "slice!", "split",
    "lstrip", "lstrip!", "rstrip", "rstrip!", "strip", "strip!", "intern",
    "tr", "tr!", "start_with?", "end_with?", "include?", "Array", "at",
    "delete_at", "count", "first", "last", "push", "pop", "shift", "unshift",
    "min", "max", "minmax", "join", "Range", "exclude_end?", "Hash", "delete",
    "has_key?", "has_value?", "key", "keys", "merge", "merge!", "values",
    "Exception", "message", "StandardError", "RuntimeError",
    "ZeroDivisionError", "ArgumentError", "IndexError", "TypeError",
    "collect", "map", "collect!", "map!", "delete_if", "each", "each_index",
    "each_with_index", "reject!", "reject", "sort!", "sort", "RUBY_VERSION",
    "MRUBYC_VERSION", "times", "loop", "each_byte", "each_char",
    "initialize",
)


def normalize_vocabulary(symbols: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping the first occurrence and the input order."""
    seen: set[str] = set()
    result: list[str] = []
    for sym in symbols:
        if sym in seen:
            logger.warning(f"Duplicate symbol dropped from vocabulary: {sym!r}")
            continue
        seen.add(sym)
        result.append(sym)
    return result


def load_vocabulary(path: str | Path) -> list[str]:
    """Read one symbol per line. Blank lines and ``#`` comments are skipped."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise VocabularyError(f"Failed to read vocabulary {path}: {e}") from e

    symbols = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        symbols.append(line)

    logger.debug(f"Loaded {len(symbols)} symbols from {path}")
    return symbols
