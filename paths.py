"""
Edge and path value types.

Edges are directed and immutable; a bidirectional relationship is two
opposing Edge values. A Path is the ordered edge sequence produced by a
shortest-path search, plus the cost it accumulated under the cost function
used to build it.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Tuple, Union
import math

from vertices import K


Weight = Union[int, float]


@dataclass(frozen=True)
class Edge(Generic[K]):
    """
    Directed, weighted edge source -> target.

    Equality and hashing cover (source, target, weight), so two edges between
    the same pair with different weights are distinct values.
    """

    source: K
    target: K
    weight: Weight = 1

    def reversed(self) -> "Edge[K]":
        """Opposing edge with the same weight."""
        return Edge(self.target, self.source, self.weight)

    def __str__(self) -> str:
        return f"{self.source}\t{self.target}\t{self.weight}"


CostFunction = Callable[[Edge], float]


def weight_cost(edge: Edge) -> float:
    """Default cost: the raw edge weight."""
    return edge.weight


def confidence_cost(edge: Edge) -> float:
    """
    Convert a STRING-style confidence score (0..1000) into a distance, so
    high-confidence interactions are cheap to traverse.
    """
    return 1000 - edge.weight


@dataclass(frozen=True)
class Path(Generic[K]):
    """
    Ordered source -> target walk.

    The empty sentinel (no edges, infinite cost) means "no path under the
    constraints used". A search from a vertex to itself yields a trivial
    path: no edges but cost 0.0, which is not empty.
    """

    edges: Tuple[Edge[K], ...] = ()
    cost: float = math.inf

    @classmethod
    def empty(cls) -> "Path[K]":
        return cls((), math.inf)

    @classmethod
    def trivial(cls) -> "Path[K]":
        return cls((), 0.0)

    @property
    def is_empty(self) -> bool:
        return math.isinf(self.cost) and not self.edges

    @property
    def length(self) -> int:
        """Vertex count: edges + 1, or 0 for the empty sentinel."""
        return 0 if self.is_empty else len(self.edges) + 1

    @property
    def source(self) -> K:
        if not self.edges:
            raise ValueError("Path has no edges; source is undefined.")
        return self.edges[0].source

    @property
    def target(self) -> K:
        if not self.edges:
            raise ValueError("Path has no edges; target is undefined.")
        return self.edges[-1].target

    def vertices(self) -> List[K]:
        """Vertices visited in order (empty list for edge-less paths)."""
        if not self.edges:
            return []
        return [self.edges[0].source, *(e.target for e in self.edges)]

    def __iter__(self) -> Iterator[Edge[K]]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __bool__(self) -> bool:
        return not self.is_empty
