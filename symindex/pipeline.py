"""Sequential generation phases with timing."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from symindex.config import GenerationResult, GeneratorConfig, IndexTable
from symindex.index.builder import build_table, detect_collisions
from symindex.index.verifier import max_depth, verify_table
from symindex.output import render
from symindex.vocabulary import BUILTIN_SYMBOLS, load_vocabulary, normalize_vocabulary

logger = logging.getLogger(__name__)


_PHASE_LABELS = {
    "vocabulary": "Loading vocabulary",
    "collisions": "Checking hash collisions",
    "construction": "Building index tree",
    "verification": "Verifying lookups",
    "emission": "Rendering table",
}


def resolve_vocabulary(config: GeneratorConfig) -> list[str]:
    """Vocabulary file (or the built-in set) followed by appended names."""
    if config.vocabulary_path:
        symbols = load_vocabulary(config.vocabulary_path)
    else:
        symbols = list(BUILTIN_SYMBOLS)
    symbols.extend(config.append)
    return normalize_vocabulary(symbols)


def run_pipeline(
    config: GeneratorConfig,
    symbols: Iterable[str] | None = None,
    progress_callback=None,
) -> GenerationResult:
    """Generate, verify and render the index.

    Args:
        config: Generator configuration.
        symbols: Explicit vocabulary. When omitted it is resolved from
            ``config`` (vocabulary file or built-in set, plus appended names).
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.

    Raises:
        IndexGenerationError: on a hash collision or failed verification.
            Nothing is rendered in either case.
    """
    vocabulary: list[str] = []
    pairs: list[tuple[int, str]] = []
    table = IndexTable()
    rendered = ""
    timings: dict[str, float] = {}

    def load() -> None:
        nonlocal vocabulary
        if symbols is None:
            vocabulary = resolve_vocabulary(config)
        else:
            vocabulary = normalize_vocabulary(list(symbols) + list(config.append))

    def collide() -> None:
        nonlocal pairs
        pairs = detect_collisions(vocabulary)

    def construct() -> None:
        nonlocal table
        table = build_table(pairs)

    def emit() -> None:
        nonlocal rendered
        rendered = render(table, config)

    phases = [
        ("vocabulary", load),
        ("collisions", collide),
        ("construction", construct),
        ("verification", lambda: verify_table(table, vocabulary)),
        ("emission", emit),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn()
        timings[name] = time.monotonic() - start
        logger.info(f"Phase {name} finished in {timings[name] * 1000:.1f}ms")

    stats = {
        "symbols": len(table),
        "max_depth": max_depth(table),
        "format": config.output_format,
    }
    return GenerationResult(
        table=table,
        symbols=vocabulary,
        rendered=rendered,
        stats=stats,
        timings=timings,
    )
