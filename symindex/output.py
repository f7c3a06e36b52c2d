"""Serialisation of a built index as C static data or JSON."""

from __future__ import annotations

import json
from pathlib import Path

from symindex import __version__
from symindex.config import MAX_NODES, GeneratorConfig, IndexTable
from symindex.errors import OffsetOverflowError
from symindex.index.verifier import max_depth

FORMATS = ("c", "json")


def _c_string(text: str) -> str:
    """Quote ``text`` as a C string literal."""
    out = []
    for b in text.encode("utf-8"):
        ch = chr(b)
        if ch in ('"', "\\"):
            out.append("\\" + ch)
        elif 0x20 <= b < 0x7F:
            out.append(ch)
        else:
            out.append(f"\\{b:03o}")
    return '"' + "".join(out) + '"'


def render_c(
    table: IndexTable,
    struct_name: str = "SYM_INDEX",
    table_name: str = "base_index",
) -> str:
    """Render the table as a C array of {hash, left, right, text} records."""
    if len(table) > MAX_NODES:
        raise OffsetOverflowError(len(table), MAX_NODES)

    lines = [
        f"/* Generated by symindex {__version__}. Do not edit. */",
        f"static const struct {struct_name} {table_name}[] = {{",
    ]
    for node in table:
        lines.append(
            f"  {{0x{node.hash:04x}, 0x{node.left:02x}, 0x{node.right:02x}, {_c_string(node.text)}}},"
        )
    lines.append("};")
    return "\n".join(lines) + "\n"


def render_json(table: IndexTable) -> str:
    """Render the table as JSON, one object per node in table order."""
    data = {
        "version": "1.0",
        "metadata": {
            "generator": "symindex",
            "generator_version": __version__,
        },
        "stats": {
            "symbols": len(table),
            "max_depth": max_depth(table),
        },
        "nodes": [
            {
                "index": i,
                "hash": f"0x{node.hash:04x}",
                "left": node.left,
                "right": node.right,
                "text": node.text,
            }
            for i, node in enumerate(table)
        ],
    }
    return json.dumps(data, indent=2) + "\n"


def render(table: IndexTable, config: GeneratorConfig) -> str:
    """Render in the format named by ``config.output_format``."""
    if config.output_format == "c":
        return render_c(table, config.struct_name, config.table_name)
    if config.output_format == "json":
        return render_json(table)
    raise ValueError(f"Unknown output format: {config.output_format!r}")


def write_output(text: str, output_path: str) -> None:
    """Write rendered output to a file, creating parent directories."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
