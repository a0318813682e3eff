# src/graphtree/tree/__init__.py
"""
graphtree.tree
==============

Rooted-tree views over a directed graph.

Public API (this subpackage):

- TreeView         : base view holding the graph reference and edge layer.
- DirectedTreeView : root, parent/children, depth, height, degree, subtree
                     and validity queries for a given edge direction.
- OutTree / InTree : DirectedTreeView with edges pointing away from / toward
                     the root.
- EdgeDirection    : edge-direction strategy (OUTBOUND = "out", INBOUND = "in").
- tree_view        : build the view configured in the application settings.
"""

from __future__ import annotations

from .base import TreeView
from .direction import EdgeDirection
from .directed import DirectedTreeView, InTree, OutTree, tree_view

__all__ = [
    "TreeView",
    "EdgeDirection",
    "DirectedTreeView",
    "InTree",
    "OutTree",
    "tree_view",
]
