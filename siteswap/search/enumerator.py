"""Ordered cycle search over a juggling state graph.

Every walk of a fixed number of states is visited in lexicographic order of
throw heights, like an odometer: the last position advances to the next
sibling, carrying into earlier positions when it runs out. A walk whose
first and last states coincide spells out a siteswap.
"""

import logging
from collections import Counter
from collections.abc import Iterator

from siteswap.graph.builder import get_children, get_label
from siteswap.graph.types import NO_EDGE, StateGraph
from siteswap.pattern.siteswap import Siteswap

log = logging.getLogger(__name__)


def iter_paths(graph: StateGraph, root: int, length: int) -> Iterator[tuple[int, ...]]:
    """Yield every walk of ``length`` states starting at ``root``.

    Walks come out in ascending lexicographic order of their throw
    heights, each exactly once.

    Raises:
        ValueError: If length < 1.
        UnknownStateError: If root is not a node of the graph.
    """
    if length < 1:
        raise ValueError(f"path length must be >= 1, got {length}")

    # path[k] is reached from path[k-1] through its choice[k-1]-th child
    path = [root]
    choice: list[int] = []
    siblings = [list(get_children(graph, root).values())]

    def extend() -> None:
        while len(path) < length:
            path.append(siblings[-1][0])
            choice.append(0)
            siblings.append(list(get_children(graph, path[-1]).values()))

    extend()
    while True:
        yield tuple(path)

        # Drop trailing positions until one has an unvisited sibling.
        while choice:
            path.pop()
            siblings.pop()
            nxt = choice.pop() + 1
            if nxt < len(siblings[-1]):
                path.append(siblings[-1][nxt])
                choice.append(nxt)
                siblings.append(list(get_children(graph, path[-1]).values()))
                extend()
                break
        else:
            return


def path_to_sequence(graph: StateGraph, path: tuple[int, ...]) -> tuple[int, ...]:
    """Throw heights along the edges of a path."""
    heights = []
    for source, target in zip(path, path[1:]):
        height = get_label(graph, source, target)
        if height == NO_EDGE:
            raise ValueError(f"no edge between states {source} and {target}")
        heights.append(height)
    return tuple(heights)


def iter_cycle_witnesses(graph: StateGraph, period: int) -> Iterator[tuple[int, ...]]:
    """Yield the throw sequence of every closed walk with ``period`` throws.

    Every node is tried as a starting state, in ascending order, so a
    pattern is typically found once per state on its cycle.
    """
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")

    for root in sorted(graph.nodes):
        for path in iter_paths(graph, root, period + 1):
            if path[0] == path[-1]:
                yield path_to_sequence(graph, path)


def generate(
    graph: StateGraph,
    period: int,
    stats: Counter[str] | None = None,
) -> Iterator[Siteswap]:
    """Yield the siteswaps whose minimal period is exactly ``period``.

    Closed walks that merely repeat a shorter pattern (3 3 3 at period 3)
    are skipped; they are reported at their own period instead. Output
    order is deterministic for a given graph and period.

    Args:
        graph: State graph to search.
        period: Number of throws per pattern.
        stats: Optional counter; "witnesses" counts every closed walk,
            "emitted" every siteswap yielded.
    """
    log.debug("Generating cycles with period %d", period)
    for sequence in iter_cycle_witnesses(graph, period):
        siteswap = Siteswap(sequence)
        if stats is not None:
            stats["witnesses"] += 1
        if siteswap.period != period:
            continue
        if stats is not None:
            stats["emitted"] += 1
        yield siteswap
