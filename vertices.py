"""
Vertex keys for interaction graphs.

Any hashable, totally ordered value can key a vertex: plain strings, ints,
or richer records such as Protein. Ordering is needed to canonicalise cached
path keys and to break ties when ranking endpoints.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar


class SupportsVertexKey(Protocol):
    """Capability required of vertex keys: equality, hashing, total order."""

    def __hash__(self) -> int: ...

    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=SupportsVertexKey)


@dataclass(frozen=True, order=True)
class Protein:
    """
    Protein vertex keyed by its interactome accession (e.g. a STRING id).

    Ordering and equality use the accession only; the gene symbol is display
    metadata.
    """

    accession: str
    symbol: str = field(default="", compare=False)

    @property
    def id(self) -> str:
        return self.accession

    def __str__(self) -> str:
        return self.accession
