"""Single-character siteswap notation.

Throw heights 0..35 are written as ``0-9`` then ``a-z`` (upper case is
accepted on input). A pattern is the concatenation of its throws, so
"b97531" is [11, 9, 7, 5, 3, 1].
"""

from collections.abc import Sequence

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_HEIGHT = len(ALPHABET) - 1

_VALUES = {c: i for i, c in enumerate(ALPHABET)}


class NotationError(ValueError):
    """Raised for characters or heights outside the notation alphabet."""


def char_to_height(c: str) -> int:
    """'a' -> 10, 'Z' -> 35."""
    if not c.isascii():
        raise NotationError(f"not a throw height: {c!r}")
    try:
        return _VALUES[c.lower()]
    except KeyError:
        raise NotationError(f"not a throw height: {c!r}") from None


def height_to_char(height: int) -> str:
    """12 -> 'c'."""
    if height < 0 or height > MAX_HEIGHT:
        raise NotationError(f"throw height out of range 0..{MAX_HEIGHT}: {height}")
    return ALPHABET[height]


def decode(text: str | None) -> tuple[int, ...] | None:
    """Parse a pattern string; None if empty or any character is invalid.

    Example: decode("1337beef") == (1, 3, 3, 7, 11, 14, 14, 15)
    """
    if not text:
        return None
    try:
        return tuple(char_to_height(c) for c in text)
    except NotationError:
        return None


def encode(sequence: Sequence[int]) -> str | None:
    """Render a sequence; None if any height is not encodable."""
    try:
        return "".join(height_to_char(h) for h in sequence)
    except NotationError:
        return None
