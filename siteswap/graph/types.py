"""State graph data structures."""

from dataclasses import dataclass

# Returned by get_label when two states are not connected.
NO_EDGE = -1


class UnknownStateError(KeyError):
    """Raised when a state that is not a node of the graph is queried."""


@dataclass(frozen=True)
class StateGraph:
    """Immutable juggling state graph for one (balls, max_height) pair.

    ``edges`` maps every node to its children as ``(throw_height, child)``
    pairs in strictly ascending throw height. Enumeration relies on that
    order being stable.
    """

    balls: int
    max_height: int
    root: int
    nodes: frozenset[int]
    edges: dict[int, tuple[tuple[int, int], ...]]

    @property
    def num_edges(self) -> int:
        return sum(len(children) for children in self.edges.values())
