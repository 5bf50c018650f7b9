"""Canonical form of cyclic throw sequences.

A siteswap repeats forever, so [3, 3, 3], [3] describe the same pattern, as
do [4, 4, 1] and [1, 4, 4]. The canonical form is the shortest repeating
block rotated to its lexicographically largest rotation:

    [3, 3, 3]          -> (3,)
    [1, 4, 4, 1, 4, 4] -> (4, 4, 1)
"""

from collections.abc import Sequence


def is_periodic(sequence: Sequence[int], block: int) -> bool:
    """True if ``sequence`` is ``sequence[:block]`` repeated exactly."""
    n = len(sequence)
    if block < 1 or n % block != 0:
        return False
    return all(sequence[i] == sequence[i % block] for i in range(block, n))


def minimal_block(sequence: Sequence[int]) -> tuple[int, ...]:
    """Shortest prefix which, repeated, reproduces ``sequence``."""
    n = len(sequence)
    for block in range(1, n):
        if n % block == 0 and is_periodic(sequence, block):
            return tuple(sequence[:block])
    return tuple(sequence)


def _compare_rotations(sequence: Sequence[int], s1: int, s2: int) -> int:
    """Compare rotation s1 against rotation s2: 1, 0 or -1."""
    n = len(sequence)
    for i in range(n):
        a = sequence[(i + s1) % n]
        b = sequence[(i + s2) % n]
        if a > b:
            return 1
        if a < b:
            return -1
    return 0


def max_rotation(sequence: Sequence[int]) -> tuple[int, ...]:
    """Lexicographically largest rotation; ties keep the lowest shift."""
    n = len(sequence)
    best = 0
    for shift in range(1, n):
        if _compare_rotations(sequence, shift, best) == 1:
            best = shift
    return tuple(sequence[best:]) + tuple(sequence[:best])


def normalize(sequence: Sequence[int]) -> tuple[int, ...]:
    """Reduce to the minimal repeating block, then pick its maximal rotation.

    Idempotent, and any two phases or repetitions of the same cyclic
    pattern normalize to the same tuple.
    """
    return max_rotation(minimal_block(sequence))
