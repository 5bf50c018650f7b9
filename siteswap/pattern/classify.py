"""Named classification filters over pattern strings."""

from collections.abc import Callable, Iterable, Iterator

from siteswap.pattern.siteswap import Siteswap

Predicate = Callable[[Siteswap], bool]

FILTERS: dict[str, Predicate] = {
    "i1": Siteswap.is_interesting_1,
    "i2": Siteswap.is_interesting_2,
    "nikolaj": Siteswap.is_interesting_nikolaj,
    "reverse": Siteswap.is_reverse_valid,
}


def get_filter(name: str) -> Predicate:
    """Look up a filter by case-insensitive name."""
    try:
        return FILTERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Invalid filter: {name!r} (choose from {', '.join(FILTERS)})"
        ) from None


def filter_lines(lines: Iterable[str], name: str) -> Iterator[str]:
    """Yield the lines whose pattern satisfies the named filter.

    The line terminator is stripped; the rest of the line is yielded as
    read. Lines that do not parse as a pattern never match.

    Raises:
        ValueError: If the filter name is unknown (raised immediately,
            before any line is read).
    """
    predicate = get_filter(name)
    texts = (line.rstrip("\r\n") for line in lines)
    return (text for text in texts if predicate(Siteswap.from_string(text)))
