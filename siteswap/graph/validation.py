"""Structural checks of a built state graph.

Verifies that the stored edges follow the transition rule, that child
labels are strictly ascending (enumeration depends on it), and that every
node is reachable from the root state.
"""

import logging

from scipy.sparse.csgraph import breadth_first_order

from siteswap.graph.adjacency import to_adjacency
from siteswap.graph.builder import compute_children
from siteswap.graph.states import format_state
from siteswap.graph.types import StateGraph

log = logging.getLogger(__name__)


def check_transitions(graph: StateGraph) -> list[str]:
    """Check every node's children against the transition rule.

    Returns:
        List of error strings (empty = all transitions correct).
    """
    errors: list[str] = []
    for node in sorted(graph.nodes):
        name = format_state(node, graph.max_height)
        if node not in graph.edges:
            errors.append(f"Node {name} has no edge entry")
            continue
        children = graph.edges[node]
        labels = [height for height, _ in children]
        if any(a >= b for a, b in zip(labels, labels[1:])):
            errors.append(f"Node {name}: labels not ascending {labels}")
        if children != compute_children(node, graph.max_height):
            errors.append(f"Node {name}: children violate transition rule")
        for height, child in children:
            if child not in graph.nodes:
                errors.append(
                    f"Node {name}: child via {height} is not a graph node"
                )
    return errors


def unreachable_states(graph: StateGraph) -> set[int]:
    """States that cannot be reached from the root."""
    adjacency, order = to_adjacency(graph)
    root_idx = order.index(graph.root)
    reached = breadth_first_order(
        adjacency, root_idx, directed=True, return_predecessors=False
    )
    reached_states = {order[i] for i in reached.tolist()}
    return set(order) - reached_states


def validate_graph(graph: StateGraph) -> list[str]:
    """Validate a state graph.

    Checks (cheapest first):
    1. Root state is a node
    2. Edge rule, label ordering and child membership per node
    3. Every node is reachable from the root

    Returns:
        List of error strings (empty = valid graph).
    """
    if graph.root not in graph.nodes:
        return [f"Root {format_state(graph.root, graph.max_height)} is not a node"]

    errors = check_transitions(graph)
    if errors:
        return errors

    for state in sorted(unreachable_states(graph)):
        errors.append(
            f"State {format_state(state, graph.max_height)} "
            f"is not reachable from root"
        )

    log.debug(
        "Graph validation: %d nodes, %d errors", len(graph.nodes), len(errors)
    )
    return errors
