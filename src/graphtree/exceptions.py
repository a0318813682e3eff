from __future__ import annotations


class GraphTreeError(Exception):
    pass


class NotFoundError(GraphTreeError, LookupError):
    """A required element does not exist (no root, or a vertex without parent)."""
    pass


class InvalidStructureError(GraphTreeError, ValueError):
    """
    The directed graph is not a valid tree at the point queried.

    Raised for vertices with more than one parent and for cycles or duplicate
    links reached by a walk. Use `is_tree()` for a non-raising check.
    """
    pass


class UnderflowError(GraphTreeError, ValueError):
    """An aggregate query has nothing to aggregate over (empty graph)."""
    pass
