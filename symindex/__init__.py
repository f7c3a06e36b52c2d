"""symindex - Static symbol lookup index generator for embedded runtimes."""

__version__ = "0.1.0"

from symindex.config import GeneratorConfig, IndexNode, IndexTable  # noqa: E402
from symindex.index import build_index, calc_hash, search, verify_table  # noqa: E402

__all__ = [
    "GeneratorConfig",
    "IndexNode",
    "IndexTable",
    "build_index",
    "calc_hash",
    "search",
    "verify_table",
    "__version__",
]
