"""
Clustering coefficients for directed interaction graphs.

The local coefficient of v looks at its distinct out-neighbours N and counts
the ordered pairs (x, y) in N x N joined by an edge x -> y, normalised by
|N| * (|N| - 1). The global coefficient is the mean over all vertices.
"""

from typing import Dict, List, Set

import numpy as np
from scipy import sparse

from graph import Graph
from vertices import K


def out_neighbors(graph: Graph[K], vertex: K) -> Set[K]:
    """Distinct targets of vertex's outgoing edges."""
    return {edge.target for edge in graph.neighbors(vertex)}


def local_clustering_coefficient(graph: Graph[K], vertex: K) -> float:
    """
    Fraction of ordered out-neighbour pairs that are themselves linked.

    Returns 0.0 when vertex has fewer than two distinct out-neighbours.
    Self loops among the neighbours count as linked pairs, so the value can
    exceed 1.0.
    Raises MissingVertexError for unknown vertices.
    """
    neighbors = out_neighbors(graph, vertex)
    k = len(neighbors)
    if k <= 1:
        return 0.0

    links = 0
    for x in neighbors:
        links += sum(1 for y in out_neighbors(graph, x) if y in neighbors)
    return links / (k * (k - 1))


def global_clustering_coefficient(graph: Graph[K]) -> float:
    """Mean local coefficient over every vertex; 0.0 for an empty graph."""
    vertices = list(graph.vertices())
    if not vertices:
        return 0.0
    return sum(local_clustering_coefficient(graph, v) for v in vertices) / len(vertices)


def adjacency_matrix(graph: Graph[K], order: List[K]) -> sparse.csr_matrix:
    """
    Binary CSR adjacency matrix with rows/columns in the given vertex order.
    Parallel edges with different weights collapse to a single 1.
    """
    index = {v: i for i, v in enumerate(order)}
    rows: List[int] = []
    cols: List[int] = []
    for v in order:
        for target in out_neighbors(graph, v):
            rows.append(index[v])
            cols.append(index[target])
    n = len(order)
    data = np.ones(len(rows), dtype=np.int64)
    return sparse.csr_matrix((data, (rows, cols)), shape=(n, n), dtype=np.int64)


def clustering_coefficients(graph: Graph[K]) -> Dict[K, float]:
    """
    Local coefficient of every vertex, computed with sparse matrix products.

    With binary adjacency A, the link count among v's out-neighbours is
    sum_y (A @ A)[v, y] * A[v, y], and |N(v)| is the row sum of A.
    """
    order = sorted(graph.vertices())
    if not order:
        return {}

    a = adjacency_matrix(graph, order)
    links = np.asarray((a @ a).multiply(a).sum(axis=1)).ravel().astype(float)
    degree = np.asarray(a.sum(axis=1)).ravel().astype(float)

    pairs = degree * (degree - 1)
    coeffs = np.zeros(len(order), dtype=float)
    mask = degree > 1
    coeffs[mask] = links[mask] / pairs[mask]
    return {v: float(c) for v, c in zip(order, coeffs)}
