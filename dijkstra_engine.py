"""
Heap-based bounded Dijkstra for interaction graphs.

Uses Python's heapq to compute a single-pair shortest path over any Graph
implementation, honouring a cost ceiling and a hop ceiling.
"""

from typing import Dict, List, Optional, Tuple
import heapq
import math

from algorithms import ShortestPathEngine, UNBOUNDED_COST, UNBOUNDED_LENGTH
from graph import Graph
from paths import CostFunction, Edge, Path, weight_cost
from vertices import K


class BoundedDijkstraEngine(ShortestPathEngine):
    """
    Single-pair Dijkstra with cost and length bounds.

    The queue holds (distance, vertex) entries, so frontier vertices with
    equal distance are expanded in the keys' natural order. Outdated entries
    are skipped on pop rather than removed.

    Complexity:
        O(E log V) over the vertices reachable from the source.
    """

    def shortest_path(
        self,
        graph: Graph[K],
        source: K,
        target: K,
        cost: Optional[CostFunction] = None,
        max_path_cost: float = UNBOUNDED_COST,
        max_path_length: int = UNBOUNDED_LENGTH,
    ) -> Path[K]:
        if not graph.has_vertex(source) or not graph.has_vertex(target):
            return Path.empty()
        if source == target:
            return Path.trivial()

        dist, prev = self.search(graph, source, cost, max_path_cost, max_path_length)
        if target not in prev:
            return Path.empty()

        edges: List[Edge[K]] = []
        node = target
        while node != source:
            edge = prev[node]
            edges.append(edge)
            node = edge.source
        edges.reverse()
        return Path(tuple(edges), float(dist[target]))

    def search(
        self,
        graph: Graph[K],
        source: K,
        cost: Optional[CostFunction] = None,
        max_path_cost: float = UNBOUNDED_COST,
        max_path_length: int = UNBOUNDED_LENGTH,
    ) -> Tuple[Dict[K, float], Dict[K, Edge[K]]]:
        """
        Bounded single-source search.

        A vertex is improved through an edge when the new distance beats the
        best known one and stays within max_path_cost. The source counts as
        length 1; a vertex whose length has reached max_path_length is not
        expanded, so no path has more than max_path_length - 1 edges.

        Returns:
            (dist, prev) where dist maps each reached vertex to its cost and
            prev maps each reached vertex (except the source) to the edge it
            was reached through.
        """
        edge_cost = cost or weight_cost
        dist: Dict[K, float] = {source: 0.0}
        hops: Dict[K, int] = {source: 1}
        prev: Dict[K, Edge[K]] = {}
        pq: List[Tuple[float, K]] = [(0.0, source)]

        while pq:
            d_u, u = heapq.heappop(pq)
            if d_u != dist.get(u, math.inf):
                continue
            if hops[u] >= max_path_length:
                continue

            for edge in graph.neighbors(u):
                v = edge.target
                alt = d_u + edge_cost(edge)
                if alt < dist.get(v, math.inf) and alt <= max_path_cost:
                    dist[v] = alt
                    hops[v] = hops[u] + 1
                    prev[v] = edge
                    heapq.heappush(pq, (alt, v))

        return dist, prev
