"""The Siteswap value object."""

from dataclasses import dataclass, field
from math import gcd

from siteswap.pattern.canonical import normalize
from siteswap.pattern.notation import decode, encode
from siteswap.pattern.validity import average_balls, is_valid

# Shared hash of every invalid instance (they all compare equal).
_INVALID_HASH = hash(("siteswap", "invalid"))


@dataclass(frozen=True, eq=False, slots=True)
class Siteswap:
    """A throw sequence, valid or not, reduced to canonical form.

    ``raw`` is kept as given (None when text could not be decoded);
    ``sequence`` is the canonical form used for equality, hashing and
    every classification. All invalid instances are equal to each other.
    """

    raw: tuple[int, ...] | None
    sequence: tuple[int, ...] = field(init=False)
    valid: bool = field(init=False)

    def __post_init__(self) -> None:
        if self.raw is not None:
            object.__setattr__(self, "raw", tuple(self.raw))
        canonical = normalize(self.raw) if self.raw else ()
        object.__setattr__(self, "sequence", canonical)
        object.__setattr__(self, "valid", is_valid(canonical))

    @classmethod
    def from_string(cls, text: str | None) -> "Siteswap":
        return cls(decode(text))

    @property
    def period(self) -> int:
        return len(self.sequence)

    @property
    def balls(self) -> int | None:
        return average_balls(self.sequence)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Siteswap):
            return NotImplemented
        if not self.valid or not other.valid:
            return self.valid == other.valid
        return self.sequence == other.sequence

    def __hash__(self) -> int:
        if not self.valid:
            return _INVALID_HASH
        return hash(self.sequence)

    def __str__(self) -> str:
        if not self.valid:
            return ""
        return encode(self.sequence) or ""

    def contains(self, height: int) -> bool:
        """Whether some throw has exactly this height."""
        return self.valid and height in self.sequence

    def is_interesting_1(self) -> bool:
        """A high throw (4 or more) directly follows a 1 somewhere."""
        if not self.valid:
            return False
        n = self.period
        return any(
            self.sequence[i] == 1 and self.sequence[(i + 1) % n] >= 4
            for i in range(n)
        )

    def is_interesting_2(self) -> bool:
        """Every high throw (4 or more) is directly preceded by a 1."""
        if not self.valid:
            return False
        n = self.period
        return all(
            self.sequence[(i - 1) % n] == 1
            for i in range(n)
            if self.sequence[i] >= 4
        )

    def is_reverse_valid(self) -> bool:
        """The throws played backwards are also a valid siteswap."""
        return self.valid and is_valid(self.sequence[::-1])

    def is_interesting_nikolaj(self) -> bool:
        """Nikolaj Beluhov's class of patterns.

        Period not divisible by 2 or 3, no 1s, every throw above 2 coprime
        with the period, and few 0s and 2s: fewer than 2 of them when the
        period is below 6, fewer than 3 otherwise.
        """
        if not self.valid:
            return False
        n = self.period
        if n % 2 == 0 or n % 3 == 0:
            return False
        if 1 in self.sequence:
            return False
        if any(h > 2 and gcd(h, n) != 1 for h in self.sequence):
            return False
        low = sum(1 for h in self.sequence if h in (0, 2))
        return low < (2 if n < 6 else 3)
