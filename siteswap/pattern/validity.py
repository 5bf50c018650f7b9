"""Physical realizability of vanilla siteswaps."""

from collections.abc import Sequence

import numpy as np


def landing_beats(sequence: Sequence[int]) -> np.ndarray:
    """Beat (mod period) on which each throw lands."""
    n = len(sequence)
    heights = np.asarray(sequence, dtype=np.int64)
    return (np.arange(n, dtype=np.int64) + heights) % n


def is_valid(sequence: Sequence[int] | None) -> bool:
    """Check whether ``sequence`` is a valid vanilla siteswap.

    Valid iff it is non-empty, has no negative throws, its throw sum is a
    multiple of its length (integer ball count) and no two throws land on
    the same beat.
    """
    if sequence is None or len(sequence) == 0:
        return False
    if min(sequence) < 0:
        return False

    n = len(sequence)
    if sum(sequence) % n != 0:
        return False

    landing = np.bincount(landing_beats(sequence), minlength=n)
    return bool((landing <= 1).all())


def average_balls(sequence: Sequence[int] | None) -> int | None:
    """Number of balls a valid sequence juggles, None if invalid."""
    if not is_valid(sequence):
        return None
    return sum(sequence) // len(sequence)
