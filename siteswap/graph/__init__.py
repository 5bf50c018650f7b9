"""State graph module: bit-vector states, graph closure, queries and checks."""

from siteswap.graph.adjacency import to_adjacency
from siteswap.graph.builder import (
    build_state_graph,
    compute_children,
    describe_graph,
    get_children,
    get_label,
    get_next_child,
)
from siteswap.graph.states import (
    clear_position,
    format_state,
    is_set,
    root_state,
    set_position,
    shift_left,
)
from siteswap.graph.types import NO_EDGE, StateGraph, UnknownStateError
from siteswap.graph.validation import (
    check_transitions,
    unreachable_states,
    validate_graph,
)

__all__ = [
    "NO_EDGE",
    "StateGraph",
    "UnknownStateError",
    "build_state_graph",
    "check_transitions",
    "clear_position",
    "compute_children",
    "describe_graph",
    "format_state",
    "get_children",
    "get_label",
    "get_next_child",
    "is_set",
    "root_state",
    "set_position",
    "shift_left",
    "to_adjacency",
    "unreachable_states",
    "validate_graph",
]
