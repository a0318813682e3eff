try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .exceptions import GraphTreeError, InvalidStructureError, NotFoundError, UnderflowError
from .graph import Graph
from .tree import DirectedTreeView, EdgeDirection, InTree, OutTree, TreeView, tree_view

__all__ = [
    "__version__",
    "Graph",
    "TreeView",
    "DirectedTreeView",
    "InTree",
    "OutTree",
    "EdgeDirection",
    "tree_view",
    "GraphTreeError",
    "NotFoundError",
    "InvalidStructureError",
    "UnderflowError",
]
