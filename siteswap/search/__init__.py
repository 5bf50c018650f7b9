"""Cycle search module: ordered path enumeration and batch collection."""

from siteswap.search.collection import collect_siteswaps, ordered_siteswaps
from siteswap.search.enumerator import (
    generate,
    iter_cycle_witnesses,
    iter_paths,
    path_to_sequence,
)
from siteswap.search.types import GenerationResult

__all__ = [
    "GenerationResult",
    "collect_siteswaps",
    "generate",
    "iter_cycle_witnesses",
    "iter_paths",
    "ordered_siteswaps",
    "path_to_sequence",
]
