# src/graphtree/graph/protocol.py
from __future__ import annotations

from typing import Hashable, Iterable, Protocol, Sequence, TypeVar

V = TypeVar("V")


class GraphLike(Protocol[V]):
    """
    Read-only graph interface consumed by the tree views.

    Vertices are opaque; `vertex_id` supplies the unique hashable key used
    for equality and deduplication. Vertex enumeration must be stable within
    one call.
    """

    def vertices(self) -> Iterable[V]: ...

    def is_empty(self) -> bool: ...

    def has_vertex(self, vertex: V) -> bool: ...

    def count_vertices(self) -> int: ...

    def vertex_id(self, vertex: V) -> Hashable: ...

    def successors(self, vertex: V, layer: int = 0) -> Sequence[V]:
        """Vertices one outbound edge away from `vertex` in `layer`."""
        ...

    def predecessors(self, vertex: V, layer: int = 0) -> Sequence[V]:
        """Vertices one inbound edge away from `vertex` in `layer`."""
        ...
