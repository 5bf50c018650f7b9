"""Sparse adjacency export of a state graph."""

import numpy as np
import scipy.sparse

from siteswap.graph.types import StateGraph


def to_adjacency(graph: StateGraph) -> tuple[scipy.sparse.csr_matrix, list[int]]:
    """Export the graph as a sparse directed adjacency matrix.

    Node i of the matrix is ``order[i]`` (nodes sorted ascending). Entry
    (i, j) holds ``throw_height + 1`` so that edges labeled 0 are still
    stored entries.

    Returns:
        (adjacency, order) tuple.
    """
    order = sorted(graph.nodes)
    index = {state: i for i, state in enumerate(order)}
    rows: list[int] = []
    cols: list[int] = []
    data: list[int] = []
    for state in order:
        for height, child in graph.edges[state]:
            rows.append(index[state])
            cols.append(index[child])
            data.append(height + 1)
    n = len(order)
    adjacency = scipy.sparse.csr_matrix(
        (np.array(data, dtype=np.int32), (rows, cols)), shape=(n, n)
    )
    return adjacency, order
