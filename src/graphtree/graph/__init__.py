# src/graphtree/graph/__init__.py
"""
graphtree.graph
===============

Graph collaborator of the tree views.

Public API (this subpackage):

- Graph     : layered directed graph backed by python-graphblas, with an
              optional boolean vertex mask restricting the visible vertices.
- GraphMask : wrapper around a Vector[BOOL] vertex mask.
- GraphLike : typing protocol describing what the tree views consume
              (vertex enumeration, ids, successors/predecessors per layer).
"""

from __future__ import annotations

from .core import Graph
from .graph_mask import GraphMask
from .protocol import GraphLike

__all__ = [
    "Graph",
    "GraphMask",
    "GraphLike",
]
