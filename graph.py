"""
Directed, weighted graph abstraction for interaction networks.

Vertices are hashable, totally ordered keys.
Edges are directed: source -> target with a numeric weight.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Generic

from paths import Edge
from vertices import K


class MissingVertexError(AssertionError):
    """Raised when a query names a vertex the graph does not contain."""


class Graph(ABC, Generic[K]):
    """Directed, weighted graph over vertex keys."""

    @abstractmethod
    def vertices(self) -> AbstractSet[K]:
        """Return all vertices, including sinks with no outgoing edges."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, vertex: K) -> AbstractSet[Edge[K]]:
        """
        Outgoing edges of vertex.

        Raises MissingVertexError if vertex is not in the graph; callers
        check membership first.
        """
        raise NotImplementedError

    def has_vertex(self, vertex: K) -> bool:
        return vertex in self.vertices()

    def out_degree(self, vertex: K) -> int:
        return len(self.neighbors(vertex))
