"""State graph construction by reachability closure, plus edge queries."""

import logging
from collections import deque

from siteswap.graph.states import (
    format_state,
    is_set,
    root_state,
    set_position,
    shift_left,
)
from siteswap.graph.types import NO_EDGE, StateGraph, UnknownStateError

log = logging.getLogger(__name__)


def compute_children(state: int, max_height: int) -> tuple[tuple[int, int], ...]:
    """Compute the labeled transitions out of ``state``.

    If a ball lands now (position 1 occupied) it must be thrown to any free
    position of the shifted state; otherwise the only move is the empty
    throw 0.

    Returns:
        ``(throw_height, child)`` pairs in ascending throw height.
    """
    shifted = shift_left(state, max_height)
    if not is_set(state, 1):
        return ((0, shifted),)
    return tuple(
        (height, set_position(shifted, height))
        for height in range(1, max_height + 1)
        if not is_set(shifted, height)
    )


def build_state_graph(balls: int, max_height: int) -> StateGraph:
    """Build every state reachable from the root state.

    Args:
        balls: Number of balls.
        max_height: Maximum throw height.

    Returns:
        The complete, immutable StateGraph.

    Raises:
        ValueError: If balls < 1 or balls > max_height.
    """
    if balls < 1:
        raise ValueError(f"balls must be >= 1, got {balls}")
    if balls > max_height:
        raise ValueError(
            f"balls ({balls}) must be <= max_height ({max_height})"
        )

    root = root_state(balls)
    edges: dict[int, tuple[tuple[int, int], ...]] = {}
    undone: deque[int] = deque([root])
    queued = {root}

    while undone:
        node = undone.popleft()
        children = compute_children(node, max_height)
        edges[node] = children
        for _, child in children:
            if child not in queued:
                queued.add(child)
                undone.append(child)

    graph = StateGraph(
        balls=balls,
        max_height=max_height,
        root=root,
        nodes=frozenset(edges),
        edges=edges,
    )
    log.info(
        "Constructed graph: balls=%d, max_height=%d, nodes=%d, edges=%d",
        balls, max_height, len(graph.nodes), graph.num_edges,
    )
    if log.isEnabledFor(logging.DEBUG):
        for line in describe_graph(graph):
            log.debug("%s", line)
    return graph


def describe_graph(graph: StateGraph) -> list[str]:
    """One line per node: the state followed by its labeled children."""
    lines = []
    for node in sorted(graph.nodes):
        children = " ".join(
            f"{height}:{format_state(child, graph.max_height)}"
            for height, child in graph.edges[node]
        )
        lines.append(f"{format_state(node, graph.max_height)} -> {children}")
    return lines


def get_children(graph: StateGraph, state: int) -> dict[int, int]:
    """Ordered mapping throw_height -> child state for a node."""
    try:
        return dict(graph.edges[state])
    except KeyError:
        raise UnknownStateError(state) from None


def get_label(graph: StateGraph, source: int, target: int) -> int:
    """Throw height of the edge source -> target, or NO_EDGE."""
    for height, child in get_children(graph, source).items():
        if child == target:
            return height
    return NO_EDGE


def get_next_child(
    graph: StateGraph, state: int, current: int | None = None
) -> int | None:
    """Return the child after ``current`` in label order.

    With ``current=None`` returns the first child. Returns None when
    ``current`` is the last child or is not a child of ``state``.
    """
    children = list(get_children(graph, state).values())
    if current is None:
        return children[0]
    try:
        idx = children.index(current)
    except ValueError:
        return None
    if idx + 1 < len(children):
        return children[idx + 1]
    return None
