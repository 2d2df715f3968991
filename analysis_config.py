"""
Analysis configuration for interaction-graph path reduction.

Reads a YAML file of path-search and reduction settings and builds graphs
that carry the configured path policy.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import yaml

from adjacency_list_graph import AdjacencyListGraph
from algorithms import UNBOUNDED_COST, UNBOUNDED_LENGTH
from paths import CostFunction, Weight, confidence_cost, weight_cost
from vertices import K


COST_FUNCTIONS: Dict[str, CostFunction] = {
    "weight": weight_cost,
    "confidence": confidence_cost,
}


@dataclass(frozen=True)
class AnalysisConfig:
    max_path_cost: float = 200.0
    max_path_length: int = 5
    max_vertices: int = UNBOUNDED_LENGTH
    bidirectional: bool = True
    cost: str = "weight"
    min_confidence: float = 0.0

    @property
    def cost_function(self) -> CostFunction:
        return COST_FUNCTIONS[self.cost]


def config_from_mapping(data: Optional[Mapping[str, Any]]) -> AnalysisConfig:
    """
    Validate a parsed mapping and convert it to an AnalysisConfig.

    A null max_path_cost, max_path_length or max_vertices means unbounded.
    """
    data = dict(data or {})
    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    defaults = AnalysisConfig()
    max_path_cost = _number(data, "max_path_cost", defaults.max_path_cost, UNBOUNDED_COST)
    max_path_length = _integer(data, "max_path_length", defaults.max_path_length)
    max_vertices = _integer(data, "max_vertices", defaults.max_vertices)
    min_confidence = _number(data, "min_confidence", defaults.min_confidence, 0.0)
    cost = str(data.get("cost", defaults.cost))
    bidirectional = data.get("bidirectional", defaults.bidirectional)

    if max_path_cost < 0:
        raise ValueError("max_path_cost must be non-negative")
    if max_path_length <= 0:
        raise ValueError("max_path_length must be positive")
    if max_vertices < 0:
        raise ValueError("max_vertices must be non-negative")
    if cost not in COST_FUNCTIONS:
        raise ValueError(
            f"Unknown cost '{cost}'; expected one of {', '.join(sorted(COST_FUNCTIONS))}"
        )
    if not isinstance(bidirectional, bool):
        raise ValueError("bidirectional must be true or false")

    return AnalysisConfig(
        max_path_cost=max_path_cost,
        max_path_length=max_path_length,
        max_vertices=max_vertices,
        bidirectional=bidirectional,
        cost=cost,
        min_confidence=min_confidence,
    )


def load_config(path: Path) -> AnalysisConfig:
    data = yaml.safe_load(Path(path).read_text())
    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return config_from_mapping(data)


def _number(data: Mapping[str, Any], key: str, default: float, unbounded: float) -> float:
    if key not in data:
        return default
    value = data[key]
    if value is None:
        return unbounded
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return float(value)


def _integer(data: Mapping[str, Any], key: str, default: int) -> int:
    if key not in data:
        return default
    value = data[key]
    if value is None:
        return UNBOUNDED_LENGTH
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def build_graph(
    config: AnalysisConfig,
    edges: Iterable[Tuple[K, K, Weight]] = (),
) -> AdjacencyListGraph[K]:
    """
    Graph with the configured path policy, populated bidirectionally from
    (src, dst, weight) tuples whose weight reaches min_confidence.
    """
    graph: AdjacencyListGraph[K] = AdjacencyListGraph(
        max_path_cost=config.max_path_cost,
        max_path_length=config.max_path_length,
        cost=config.cost_function,
    )
    for src, dst, weight in edges:
        if weight >= config.min_confidence:
            graph.add_edge(src, dst, weight)
    return graph
