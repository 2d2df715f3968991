"""
Plain-text persistence for interaction graphs.

Layout: one vertex per line, then one edge per line as
``source<TAB>target<TAB>weight``. Paths ending in ``.gz`` are gzip
compressed.
"""

from pathlib import Path
from typing import IO, Callable, Iterable, Optional, TextIO, Union
import gzip
import logging
import os

from adjacency_list_graph import AdjacencyListGraph
from graph import Graph
from paths import Edge, Weight
from vertices import K


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _open(path: PathLike, mode: str) -> IO[str]:
    path = Path(path)
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding="utf-8")
    return path.open(mode, encoding="utf-8", newline="\n")


def _vertex_text(vertex: K) -> str:
    text = str(vertex)
    if not text or any(c in text for c in "\t\r\n"):
        raise ValueError(f"vertex {vertex!r} has no single-line, TAB-free text form")
    return text


def dump_graph(graph: Graph[K], out: TextIO) -> None:
    """
    Write graph to an open text stream in the two-block layout.

    Raises ValueError before writing anything if a vertex prints as empty
    text or as text holding a TAB or line break.
    """
    order = list(graph.vertices())
    texts = {vertex: _vertex_text(vertex) for vertex in order}
    for vertex in order:
        out.write(f"{texts[vertex]}\n")
    for vertex in order:
        for edge in graph.neighbors(vertex):
            out.write(f"{texts[edge.source]}\t{texts[edge.target]}\t{edge.weight}\n")


def save_graph(graph: Graph[K], target: Union[PathLike, TextIO]) -> None:
    """Write graph to a file path (created with its parents) or an open stream."""
    if not isinstance(target, (str, os.PathLike)):
        dump_graph(graph, target)
        return
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    with _open(path, "w") as f:
        dump_graph(graph, f)


def _parse_weight(text: str, lineno: int) -> Weight:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"line {lineno}: invalid edge weight {text!r}") from None


def parse_graph(
    lines: Iterable[str],
    key: Callable[[str], K] = str,
    graph: Optional[AdjacencyListGraph[K]] = None,
) -> AdjacencyListGraph[K]:
    """
    Build a graph from two-block layout lines.

    Args:
        lines: vertex lines (no TAB) and edge lines (exactly two TABs).
        key: converts vertex text back into vertex keys.
        graph: graph to populate; a fresh unbounded graph if None.
    """
    g = graph if graph is not None else AdjacencyListGraph()
    vertices = edges = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        parts = line.split("\t")
        if len(parts) == 1:
            g.add_vertex(key(parts[0]))
            vertices += 1
        elif len(parts) == 3:
            g.add_edge(Edge(key(parts[0]), key(parts[1]), _parse_weight(parts[2], lineno)))
            edges += 1
        else:
            raise ValueError(
                f"line {lineno}: expected a vertex or source<TAB>target<TAB>weight, got {line!r}"
            )
    logger.info("loaded graph with %d vertex lines and %d edge lines", vertices, edges)
    return g


def load_graph(
    path: PathLike,
    key: Callable[[str], K] = str,
    graph: Optional[AdjacencyListGraph[K]] = None,
) -> AdjacencyListGraph[K]:
    with _open(path, "r") as f:
        return parse_graph(f, key, graph)
