"""
Greedy multi-terminal path union ("Steiner-path" approximation).

Builds a connected, display-sized subgraph around a set of endpoints by
adding cached shortest paths between them, richest endpoint first, until the
vertex budget would be exceeded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Mapping, Optional, Set, Tuple
import logging

from algorithms import ReductionMetric
from paths import Edge, Path
from vertices import K

if TYPE_CHECKING:
    from adjacency_list_graph import AdjacencyListGraph


logger = logging.getLogger(__name__)


def out_degree_metric(graph: AdjacencyListGraph[K]) -> ReductionMetric:
    """Default metric: number of outgoing edges."""
    return graph.out_degree


def weighted_metric(
    graph: AdjacencyListGraph[K],
    weights: Mapping[K, float],
    default: float = 0.0,
) -> Callable[[K], Tuple[float, int]]:
    """
    Rank endpoints by an external per-vertex weight (e.g. how many samples
    carry a mutated gene), falling back to out-degree among equal weights.
    """

    def metric(vertex: K) -> Tuple[float, int]:
        return (weights.get(vertex, default), graph.out_degree(vertex))

    return metric


def rank_endpoints(
    graph: AdjacencyListGraph[K],
    endpoints: Iterable[K],
    metric: Optional[ReductionMetric] = None,
) -> List[K]:
    """
    Known endpoints, deduplicated, ordered by descending metric.
    Equal scores keep the vertices' natural order.
    """
    score = metric or out_degree_metric(graph)
    valid = sorted({v for v in endpoints if graph.has_vertex(v)})
    # reverse=True keeps sort stability, so ties stay in ascending key order.
    return sorted(valid, key=score, reverse=True)


def reduce_by_paths(
    graph: AdjacencyListGraph[K],
    endpoints: Iterable[K],
    max_vertices: int,
    bidirectional: bool = True,
    metric: Optional[ReductionMetric] = None,
) -> AdjacencyListGraph[K]:
    """
    Union shortest paths between endpoints into a subgraph of at most
    max_vertices vertices.

    Endpoints are taken in rank order. The top one seeds the subgraph; each
    later one contributes its find_path paths to every endpoint accepted so
    far, but only if the vertices those paths introduce still fit the budget.
    The first endpoint that does not fit stops the reduction. An endpoint with
    no path to any accepted endpoint is skipped.

    Returns:
        A fresh graph with the graph's path policy. Empty if fewer than two
        endpoints are in the graph.
    """
    if max_vertices < 0:
        raise ValueError(f"max_vertices must be non-negative, got {max_vertices}")

    result = graph.empty_like()
    ranked = rank_endpoints(graph, endpoints, metric)
    if len(ranked) < 2:
        return result

    accepted: List[K] = [ranked[0]]
    contained: Set[K] = {ranked[0]}

    for endpoint in ranked[1:]:
        paths: List[Path[K]] = [graph.find_path(other, endpoint) for other in accepted]
        edges: List[Edge[K]] = [e for p in paths for e in p]
        if not edges:
            logger.debug("skipping endpoint %s: no path to accepted endpoints", endpoint)
            continue

        introduced = {v for e in edges for v in (e.source, e.target)} - contained
        if len(contained) + len(introduced) > max_vertices:
            logger.info(
                "vertex budget %d reached after %d of %d endpoints",
                max_vertices,
                len(accepted),
                len(ranked),
            )
            break

        contained |= introduced
        accepted.append(endpoint)
        for edge in edges:
            result.add_edge(edge)
            if bidirectional:
                result.add_edge(edge.reversed())

    logger.debug(
        "reduced %d endpoints to %d vertices", len(accepted), len(result.vertices())
    )
    return result
