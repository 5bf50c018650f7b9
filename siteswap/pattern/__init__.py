"""Siteswap patterns: canonical form, validity, notation and classification."""

from siteswap.pattern.canonical import (
    is_periodic,
    max_rotation,
    minimal_block,
    normalize,
)
from siteswap.pattern.classify import FILTERS, filter_lines, get_filter
from siteswap.pattern.notation import (
    ALPHABET,
    NotationError,
    char_to_height,
    decode,
    encode,
    height_to_char,
)
from siteswap.pattern.siteswap import Siteswap
from siteswap.pattern.validity import average_balls, is_valid, landing_beats

__all__ = [
    "ALPHABET",
    "FILTERS",
    "NotationError",
    "Siteswap",
    "average_balls",
    "char_to_height",
    "decode",
    "encode",
    "filter_lines",
    "get_filter",
    "height_to_char",
    "is_periodic",
    "is_valid",
    "landing_beats",
    "max_rotation",
    "minimal_block",
    "normalize",
]
