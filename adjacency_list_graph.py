"""
Concrete directed, weighted graph implementation for interaction networks.

Implements the Graph interface with an adjacency-list representation whose
per-vertex entries are sets of Edge values, plus a memo of shortest paths
between unordered vertex pairs.
"""

from typing import (
    AbstractSet,
    Dict,
    Iterable,
    Mapping,
    Optional,
    Set,
    Tuple,
)
import logging

from algorithms import (
    ReductionMetric,
    ShortestPathEngine,
    UNBOUNDED_COST,
    UNBOUNDED_LENGTH,
)
from clustering import global_clustering_coefficient, local_clustering_coefficient
from dijkstra_engine import BoundedDijkstraEngine
from graph import Graph, MissingVertexError
from path_reduction import reduce_by_paths
from paths import CostFunction, Edge, Path, Weight, weight_cost
from vertices import K


logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph[K]):
    """
    Directed, weighted graph backed by a vertex -> set(Edge) mapping.

    The path policy (max_path_cost, max_path_length, cost) is fixed at
    construction and applies to find_path and reduce_by_paths; dijkstras
    takes its own overrides.
    """

    def __init__(
        self,
        max_path_cost: float = UNBOUNDED_COST,
        max_path_length: int = UNBOUNDED_LENGTH,
        cost: Optional[CostFunction] = None,
        engine: Optional[ShortestPathEngine] = None,
    ) -> None:
        self._adj: Dict[K, Set[Edge[K]]] = {}
        self._path_cache: Dict[Tuple[K, K], Path[K]] = {}
        self._max_path_cost = max_path_cost
        self._max_path_length = max_path_length
        self._cost: CostFunction = cost or weight_cost
        self._engine: ShortestPathEngine = engine or BoundedDijkstraEngine()

    @property
    def max_path_cost(self) -> float:
        return self._max_path_cost

    @property
    def max_path_length(self) -> int:
        return self._max_path_length

    @property
    def cost(self) -> CostFunction:
        return self._cost

    def empty_like(self) -> "AdjacencyListGraph[K]":
        """New, empty graph sharing this graph's path policy."""
        return AdjacencyListGraph(
            self._max_path_cost, self._max_path_length, self._cost, self._engine
        )

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: K) -> None:
        """Ensure vertex exists in the graph."""
        self._adj.setdefault(vertex, set())

    def add_edge(
        self,
        src,
        dst: Optional[K] = None,
        weight: Weight = 1,
        bidirectional: bool = True,
    ) -> None:
        """
        Add an edge, either as an Edge value or as (src, dst, weight).

        add_edge(edge) inserts the directed edge as given; self loops are
        accepted. add_edge(src, dst, weight, bidirectional) rejects self loops
        and missing endpoints, and with bidirectional also inserts dst -> src
        with the same weight.
        """
        if isinstance(src, Edge):
            self._insert(src)
            return

        if src is None or dst is None:
            raise ValueError("Edge endpoints must not be None.")
        if src == dst:
            raise ValueError(f"Self loops are not allowed: {src!r} -> {dst!r}")

        edge = Edge(src, dst, weight)
        self._insert(edge)
        if bidirectional:
            self._insert(edge.reversed())

    def _insert(self, edge: Edge[K]) -> None:
        self.add_vertex(edge.source)
        self.add_vertex(edge.target)
        out = self._adj[edge.source]
        if edge in out:
            return
        out.add(edge)
        # A new edge can shorten any memoised path.
        if self._path_cache:
            self._path_cache.clear()

    def remove_vertex(self, vertex: K) -> None:
        """
        Delete vertex, every edge targeting it, and every cached path that
        starts, ends or passes through it.
        """
        if vertex not in self._adj:
            return
        del self._adj[vertex]
        for edges in self._adj.values():
            stale = {e for e in edges if e.target == vertex}
            edges -= stale

        for key in [
            key
            for key, path in self._path_cache.items()
            if vertex in key or vertex in path.vertices()
        ]:
            del self._path_cache[key]

    def clear(self) -> None:
        self._adj.clear()
        self._path_cache.clear()

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> AbstractSet[K]:
        return self._adj.keys()

    def neighbors(self, vertex: K) -> AbstractSet[Edge[K]]:
        edges = self._adj.get(vertex)
        if edges is None:
            raise MissingVertexError(f"Vertex {vertex!r} is not in the graph.")
        return frozenset(edges)

    def has_vertex(self, vertex: K) -> bool:
        return vertex in self._adj

    def out_degree(self, vertex: K) -> int:
        edges = self._adj.get(vertex)
        if edges is None:
            raise MissingVertexError(f"Vertex {vertex!r} is not in the graph.")
        return len(edges)

    def edges(self) -> Iterable[Edge[K]]:
        for out in self._adj.values():
            yield from out

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    # --- Pathfinding ---------------------------------------------------------

    def dijkstras(
        self,
        source: K,
        target: K,
        cost: Optional[CostFunction] = None,
        max_path_cost: float = UNBOUNDED_COST,
        max_path_length: int = UNBOUNDED_LENGTH,
    ) -> Path[K]:
        """
        Uncached bounded shortest path from source to target.

        Ignores the graph's own policy: the cost function defaults to the
        raw edge weight and both bounds default to unbounded.
        """
        return self._engine.shortest_path(
            self, source, target, cost, max_path_cost, max_path_length
        )

    def find_path(self, a: K, b: K) -> Path[K]:
        """
        Cached shortest path between a and b under the graph's policy.

        The pair is put in canonical order (smaller key first) before both
        lookup and search, so find_path(a, b) and find_path(b, a) return the
        same Path, directed from min(a, b) to max(a, b).
        """
        src, dst = (b, a) if b < a else (a, b)
        key = (src, dst)
        path = self._path_cache.get(key)
        if path is None:
            logger.debug("path cache miss for %s -> %s", src, dst)
            path = self.dijkstras(
                src, dst, self._cost, self._max_path_cost, self._max_path_length
            )
            self._path_cache[key] = path
        return path

    def cached_paths(self) -> Mapping[Tuple[K, K], Path[K]]:
        """Read-only view of the path cache keyed by canonical pairs."""
        return dict(self._path_cache)

    # --- Derived graphs and metrics -----------------------------------------

    def subgraph_with_edges(self, edges: Iterable[Edge[K]]) -> "AdjacencyListGraph[K]":
        """Fresh graph holding exactly the given edges."""
        g = self.empty_like()
        for edge in edges:
            g.add_edge(edge)
        return g

    def subgraph_with_vertices(self, vertices: Iterable[K]) -> "AdjacencyListGraph[K]":
        """
        Fresh graph with every edge whose endpoints both lie in vertices.
        Vertices not in this graph are ignored.
        """
        keep = {v for v in vertices if v in self._adj}
        g = self.empty_like()
        for v in keep:
            g.add_vertex(v)
            for edge in self._adj[v]:
                if edge.target in keep:
                    g.add_edge(edge)
        return g

    def reduce_by_paths(
        self,
        endpoints: Iterable[K],
        max_vertices: int,
        bidirectional: bool = True,
        metric: Optional[ReductionMetric] = None,
    ) -> "AdjacencyListGraph[K]":
        """Connected subgraph spanning top-ranked endpoints within max_vertices."""
        return reduce_by_paths(self, endpoints, max_vertices, bidirectional, metric)

    def local_clustering_coefficient(self, vertex: K) -> float:
        return local_clustering_coefficient(self, vertex)

    def global_clustering_coefficient(self) -> float:
        return global_clustering_coefficient(self)
