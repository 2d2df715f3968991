"""
Algorithm interfaces for interaction-graph analysis.

Keeps graph algorithms separate from graph storage and from the analysis
layers that consume their results.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional
import math
import sys

from graph import Graph
from paths import CostFunction, Path
from vertices import K


# "No limit" sentinels for path searches.
UNBOUNDED_COST: float = math.inf
UNBOUNDED_LENGTH: int = sys.maxsize

# Scores an endpoint; higher scores are incorporated into reductions first.
# Any sortable value works (floats, or tuples for tie-breaking metrics).
ReductionMetric = Callable[[K], Any]


class ShortestPathEngine(ABC):
    """
    Interface for single-pair, constrained shortest-path computation.
    """

    @abstractmethod
    def shortest_path(
        self,
        graph: Graph[K],
        source: K,
        target: K,
        cost: Optional[CostFunction] = None,
        max_path_cost: float = UNBOUNDED_COST,
        max_path_length: int = UNBOUNDED_LENGTH,
    ) -> Path[K]:
        """
        Compute the cheapest source -> target path within the given bounds.

        Args:
            cost: maps an edge to its traversal cost (raw weight if None).
            max_path_cost: no returned path costs more than this.
            max_path_length: no returned path visits more vertices than this.

        Returns:
            The path, or Path.empty() if target is unreachable under the
            bounds or either endpoint is unknown.
        """
        raise NotImplementedError
