# src/graphtree/tree/direction.py
from __future__ import annotations

from enum import Enum
from typing import Any, List

from graphtree.graph.protocol import GraphLike


class EdgeDirection(str, Enum):
    """
    Edge-direction interpretation of a directed tree.

    OUTBOUND ("out"): out-tree, edges point parent -> child; the root has no
                      inbound edges.
    INBOUND  ("in") : in-tree, edges point child -> parent; the root has no
                      outbound edges.

    `children` and `parents` are mirror images of each other for both
    members, so u is a child of v iff v is a parent of u.
    """

    OUTBOUND = "out"
    INBOUND = "in"

    def children(self, graph: GraphLike[Any], vertex: Any, layer: int = 0) -> List[Any]:
        if self is EdgeDirection.OUTBOUND:
            return list(graph.successors(vertex, layer=layer))
        return list(graph.predecessors(vertex, layer=layer))

    def parents(self, graph: GraphLike[Any], vertex: Any, layer: int = 0) -> List[Any]:
        if self is EdgeDirection.OUTBOUND:
            return list(graph.predecessors(vertex, layer=layer))
        return list(graph.successors(vertex, layer=layer))
