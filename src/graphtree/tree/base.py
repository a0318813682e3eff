# src/graphtree/tree/base.py
from __future__ import annotations

from typing import Generic, TypeVar

from graphtree.graph.protocol import GraphLike

V = TypeVar("V")


class TreeView(Generic[V]):
    """
    Read-only tree interpretation of one edge layer of a graph.

    Holds the graph reference and the layer; the tree semantics live in
    subclasses. The graph is never mutated and nothing is cached, so every
    query reflects the graph's state at call time.
    """

    __slots__ = ("_graph", "_layer")

    def __init__(self, graph: GraphLike[V], layer: int = 0) -> None:
        if layer < 0:
            raise ValueError(f"layer must be >= 0, got {layer}")
        self._graph = graph
        self._layer = int(layer)

    @property
    def graph(self) -> GraphLike[V]:
        return self._graph

    @property
    def layer(self) -> int:
        return self._layer

    def __repr__(self) -> str:
        return f"{type(self).__name__}(graph={self._graph!r}, layer={self._layer})"
