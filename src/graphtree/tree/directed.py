# src/graphtree/tree/directed.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Set

from graphtree.config import AppSettings, get_settings
from graphtree.exceptions import InvalidStructureError, NotFoundError, UnderflowError
from graphtree.graph.protocol import GraphLike
from .base import TreeView, V
from .direction import EdgeDirection

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _HeightFrame:
    vertex: Any
    children: List[Any]
    pos: int = 0
    best: int = 0


class DirectedTreeView(TreeView[V]):
    """
    Rooted-tree queries over a directed graph.

    Tree semantics are derived purely from edge structure: the edge direction
    strategy decides which neighbours are children and which are parents.
    Nothing is enforced on the graph; malformed structure (several parents,
    cycles, duplicate links) is reported through InvalidStructureError when a
    query runs into it. Call is_tree() first for a non-raising check.
    Per-vertex queries raise NotFoundError for a vertex the graph does not
    contain, including vertices hidden by a mask.

    Walks use explicit stacks, so deep trees do not hit the recursion limit.
    """

    __slots__ = ("_direction",)

    def __init__(
        self,
        graph: GraphLike[V],
        direction: EdgeDirection | str = EdgeDirection.OUTBOUND,
        layer: int = 0,
    ) -> None:
        super().__init__(graph, layer=layer)
        self._direction = EdgeDirection(direction)

    @property
    def direction(self) -> EdgeDirection:
        return self._direction

    # ------------------------------------------------------------------ #
    # Edge-direction extension points
    # ------------------------------------------------------------------ #
    def get_vertices_children(self, vertex: V) -> List[V]:
        """
        Vertices one edge below `vertex`.

        No cycle or duplicate detection happens here; see get_vertices_subtree().
        """
        self._require_vertex(vertex)
        return self._get_vertices_children(vertex)

    def _get_vertices_children(self, vertex: V) -> List[V]:
        return self._direction.children(self._graph, vertex, layer=self._layer)

    def _get_vertices_parent(self, vertex: V) -> List[V]:
        return self._direction.parents(self._graph, vertex, layer=self._layer)

    def _vid(self, vertex: V) -> Hashable:
        return self._graph.vertex_id(vertex)

    def _require_vertex(self, vertex: V) -> None:
        if not self._graph.has_vertex(vertex):
            raise NotFoundError(f"Vertex {vertex!r} is not part of the graph")

    # ------------------------------------------------------------------ #
    # Root and validity
    # ------------------------------------------------------------------ #
    def get_vertex_root(self) -> V:
        """
        Return the first vertex (in graph order) without parents.

        If several vertices have no parents the graph is a forest, yet only
        the first one is returned and nothing signals the others. Confirm the
        structure with is_tree() when that matters.

        Raises NotFoundError for an empty graph or when every vertex has a
        parent.
        """
        for vertex in self._graph.vertices():
            if not self._get_vertices_parent(vertex):
                logger.debug("Root candidate found: %r", vertex)
                return vertex
        raise NotFoundError(
            "No possible root found. Either empty graph or no vertex without parents found."
        )

    def is_tree(self) -> bool:
        """
        Check whether the graph is a single valid tree.

        An empty graph is a (vacuous) tree. Otherwise every vertex must be
        reachable from the root exactly once. Never raises for malformed
        structure; it returns False instead.
        """
        if self._graph.is_empty():
            return True

        try:
            root = self.get_vertex_root()
        except (NotFoundError, InvalidStructureError) as e:
            logger.debug("Not a tree, root discovery failed: %s", e)
            return False

        try:
            num = len(self.get_vertices_subtree(root))
        except InvalidStructureError as e:
            logger.debug("Not a tree, subtree walk failed: %s", e)
            return False

        total = self._graph.count_vertices()
        if num != total:
            logger.debug("Not a tree, %d of %d vertices reachable from root %r", num, total, root)
            return False
        return True

    # ------------------------------------------------------------------ #
    # Parent / child queries
    # ------------------------------------------------------------------ #
    def get_vertex_parent(self, vertex: V) -> V:
        """
        Return the unique parent of `vertex`.

        Raises NotFoundError if `vertex` has no parent (it is a root) and
        InvalidStructureError if it has more than one.
        """
        self._require_vertex(vertex)
        parents = self._get_vertices_parent(vertex)
        if len(parents) != 1:
            if not parents:
                raise NotFoundError(f"No parents for vertex {vertex!r} found")
            raise InvalidStructureError(f"More than one parent for vertex {vertex!r}")
        return parents[0]

    def is_vertex_leaf(self, vertex: V) -> bool:
        self._require_vertex(vertex)
        return not self._get_vertices_children(vertex)

    def is_vertex_internal(self, vertex: V) -> bool:
        """True iff `vertex` has at least one parent and at least one child."""
        self._require_vertex(vertex)
        return bool(self._get_vertices_parent(vertex)) and bool(self._get_vertices_children(vertex))

    def get_vertices_leaf(self) -> List[V]:
        return [v for v in self._graph.vertices() if not self._get_vertices_children(v)]

    def get_vertices_internal(self) -> List[V]:
        return [
            v
            for v in self._graph.vertices()
            if self._get_vertices_parent(v) and self._get_vertices_children(v)
        ]

    # ------------------------------------------------------------------ #
    # Aggregates
    # ------------------------------------------------------------------ #
    def get_degree(self) -> int:
        """
        Degree of the tree: maximum number of children of any vertex.

        Raises UnderflowError for an empty graph.
        """
        best: Optional[int] = None
        for vertex in self._graph.vertices():
            num = len(self._get_vertices_children(vertex))
            if best is None or num > best:
                best = num
        if best is None:
            raise UnderflowError("No vertices found")
        return best

    def get_depth_vertex(self, vertex: V) -> int:
        """
        Number of edges between `vertex` and the root; the root has depth 0.

        Follows get_vertex_parent() upwards until the discovered root is
        reached (compared by vertex id), so it raises whatever root discovery
        or parent lookup raises. A parent chain that runs into itself without
        reaching the root raises InvalidStructureError.
        """
        self._require_vertex(vertex)
        root_id = self._vid(self.get_vertex_root())

        seen: Set[Hashable] = set()
        depth = 0
        current = vertex
        while (current_id := self._vid(current)) != root_id:
            if current_id in seen:
                raise InvalidStructureError(f"No path from vertex {vertex!r} to the root")
            seen.add(current_id)
            current = self.get_vertex_parent(current)
            depth += 1
        return depth

    def get_height(self) -> int:
        """
        Height of the whole tree (longest downward path from the root).

        A single-vertex graph has height 0. Raises NotFoundError when there is
        no root.
        """
        return self.get_height_vertex(self.get_vertex_root())

    def get_height_vertex(self, vertex: V) -> int:
        """
        Longest downward path from `vertex` to a leaf; leaves have height 0.

        Raises InvalidStructureError if a cycle is reachable from `vertex`.
        """
        self._require_vertex(vertex)
        vid = self._vid
        start_id = vid(vertex)

        heights: Dict[Hashable, int] = {}
        on_path: Set[Hashable] = {start_id}
        stack: List[_HeightFrame] = [_HeightFrame(vertex, self._get_vertices_children(vertex))]

        while stack:
            frame = stack[-1]
            if frame.pos < len(frame.children):
                child = frame.children[frame.pos]
                frame.pos += 1
                child_id = vid(child)
                if child_id in on_path:
                    raise InvalidStructureError(f"Cycle found below vertex {vertex!r}")
                if child_id in heights:
                    # shared descendant (several parents); height already known
                    frame.best = max(frame.best, heights[child_id] + 1)
                    continue
                on_path.add(child_id)
                stack.append(_HeightFrame(child, self._get_vertices_children(child)))
                continue

            stack.pop()
            frame_id = vid(frame.vertex)
            on_path.discard(frame_id)
            heights[frame_id] = frame.best
            if stack:
                parent = stack[-1]
                parent.best = max(parent.best, frame.best + 1)

        return heights[start_id]

    # ------------------------------------------------------------------ #
    # Subtrees
    # ------------------------------------------------------------------ #
    def get_vertices_subtree(self, vertex: V) -> Dict[Hashable, V]:
        """
        All vertices in the subtree of `vertex`, which IS included.

        Returns a mapping vertex id -> vertex. The root yields the whole tree,
        a leaf only itself. Only membership is meaningful, not ordering.

        Raises InvalidStructureError when a vertex is reached twice (a cycle
        or several links to the same vertex); the partial result is dropped.
        """
        self._require_vertex(vertex)
        vertices: Dict[Hashable, V] = {}
        stack: List[V] = [vertex]
        while stack:
            current = stack.pop()
            current_id = self._vid(current)
            if current_id in vertices:
                raise InvalidStructureError(f"Multiple links found to vertex {current!r}")
            vertices[current_id] = current
            # reversed so children are visited in the order they are returned
            stack.extend(reversed(self._get_vertices_children(current)))
        return vertices

    def get_vertices_descendant(self, vertex: V) -> Dict[Hashable, V]:
        """
        All vertices below `vertex`, which is NOT included.
        """
        vertices = self.get_vertices_subtree(vertex)
        del vertices[self._vid(vertex)]
        return vertices

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(graph={self._graph!r}, "
            f"direction={self._direction.value!r}, layer={self._layer})"
        )


class OutTree(DirectedTreeView[V]):
    """Out-tree: edges point from parent to child; the root has no inbound edges."""

    __slots__ = ()

    def __init__(self, graph: GraphLike[V], layer: int = 0) -> None:
        super().__init__(graph, direction=EdgeDirection.OUTBOUND, layer=layer)


class InTree(DirectedTreeView[V]):
    """In-tree: edges point from child to parent; the root has no outbound edges."""

    __slots__ = ()

    def __init__(self, graph: GraphLike[V], layer: int = 0) -> None:
        super().__init__(graph, direction=EdgeDirection.INBOUND, layer=layer)


def tree_view(graph: GraphLike[V], settings: AppSettings | None = None) -> DirectedTreeView[V]:
    """
    Build the tree view configured in `settings.tree` (direction and layer).

    Uses the process-wide settings when `settings` is None.
    """
    if settings is None:
        settings = get_settings()

    cfg = settings.tree
    direction = EdgeDirection(cfg.direction)
    view: DirectedTreeView[V]
    if direction is EdgeDirection.OUTBOUND:
        view = OutTree(graph, layer=cfg.layer)
    else:
        view = InTree(graph, layer=cfg.layer)
    logger.debug("Created %r", view)
    return view
