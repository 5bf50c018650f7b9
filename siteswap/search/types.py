"""Result structures for cycle enumeration."""

from dataclasses import dataclass

from siteswap.pattern.siteswap import Siteswap


@dataclass(frozen=True)
class GenerationResult:
    """Immutable record of a finished enumeration over a period range.

    ``siteswaps`` is only handed out once every requested period has been
    searched, so it is always the complete set of unique patterns.
    """

    balls: int
    max_height: int
    siteswaps: frozenset[Siteswap]
    witnesses: dict[int, int]  # period -> raw cycle witnesses found
    emitted: dict[int, int]  # period -> patterns passing the period filter
