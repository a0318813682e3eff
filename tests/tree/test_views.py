# tests/tree/test_views.py
from __future__ import annotations

import numpy as np
import pytest
from graphblas import Vector

from graphtree.config import AppSettings, TreeSettings, get_settings
from graphtree.exceptions import NotFoundError
from graphtree.graph import Graph, GraphMask
from graphtree.tree import EdgeDirection, InTree, OutTree, TreeView, tree_view


def _layered_graph() -> Graph:
    # layer 0: out-tree 0 -> {1, 3}, 1 -> 2, 3 -> 4
    # layer 1: same shape stored as an in-tree
    src0 = np.array([0, 0, 1, 3], dtype=np.int64)
    dst0 = np.array([1, 3, 2, 4], dtype=np.int64)
    w = np.ones(4, dtype=np.float64)
    return Graph.from_edges({0: (src0, dst0, w), 1: (dst0, src0, w)}, num_vertices=5)


def test_masked_view_is_a_chain() -> None:
    graph = _layered_graph()
    view = graph.get_view(mask=GraphMask.from_indices([0, 1, 2], size=5).vector)
    tree = OutTree(view)

    assert view.count_vertices() == 3
    assert tree.is_tree() is True
    assert tree.get_vertices_children(0) == [1]
    assert tree.get_degree() == 1
    assert tree.get_vertices_leaf() == [2]
    assert tree.get_height() == 2

    # the unmasked graph is untouched
    assert OutTree(graph).get_degree() == 2


def test_masked_view_without_connecting_root_is_a_forest() -> None:
    graph = _layered_graph()
    view = graph.get_view(mask=GraphMask.from_indices([1, 2, 3, 4], size=5).vector)
    tree = OutTree(view)

    # 0 is masked out, so 1 and 3 both lose their parent
    assert tree.get_vertex_root() == 1
    assert set(tree.get_vertices_subtree(1)) == {1, 2}
    assert tree.is_tree() is False


def test_queries_on_hidden_vertex_raise() -> None:
    graph = _layered_graph()
    tree = OutTree(graph.get_view(mask=GraphMask.from_indices([0, 1, 2], size=5).vector))

    # 3 has a visible parent and child in the full graph but is masked out here
    for query in (
        tree.get_vertices_subtree,
        tree.get_vertices_descendant,
        tree.get_vertices_children,
        tree.get_vertex_parent,
        tree.get_depth_vertex,
        tree.get_height_vertex,
        tree.is_vertex_leaf,
        tree.is_vertex_internal,
    ):
        with pytest.raises(NotFoundError, match="not part of the graph"):
            query(3)

    # out-of-range vertices are rejected the same way
    with pytest.raises(NotFoundError):
        OutTree(graph).get_vertices_subtree(9)

    # visible vertices are unaffected
    assert set(tree.get_vertices_subtree(0)) == {0, 1, 2}


def test_explicit_false_in_mask_hides_vertex() -> None:
    graph = _layered_graph()
    mask = Vector.from_coo([0, 1, 2, 3], [True, True, True, False], size=5)
    tree = OutTree(graph.get_view(mask=mask))

    assert tree.get_vertices_children(0) == [1]
    assert tree.is_tree() is True


def test_layers_are_analysed_independently() -> None:
    graph = _layered_graph()
    out_tree = OutTree(graph, layer=0)
    in_tree = InTree(graph, layer=1)

    assert out_tree.is_tree() is True
    assert in_tree.is_tree() is True
    assert out_tree.get_vertex_root() == in_tree.get_vertex_root() == 0
    # layer 1 read as out-tree: every original leaf becomes a root candidate
    assert OutTree(graph, layer=1).is_tree() is False


def test_tree_view_uses_settings() -> None:
    graph = _layered_graph()

    default = tree_view(graph)
    assert isinstance(default, OutTree)
    assert default.layer == 0

    settings = AppSettings(tree=TreeSettings(direction="in", layer=1))
    view = tree_view(graph, settings)
    assert isinstance(view, InTree)
    assert view.direction is EdgeDirection.INBOUND
    assert view.layer == 1
    assert view.is_tree() is True


def test_tree_view_reads_cached_settings_overrides() -> None:
    graph = _layered_graph()
    settings = get_settings(tree={"direction": "in", "layer": 1})

    view = tree_view(graph, settings)
    assert isinstance(view, InTree)
    assert view.get_vertex_root() == 0


def test_tree_view_base_holds_reference() -> None:
    graph = _layered_graph()
    base = TreeView(graph, layer=1)

    assert base.graph is graph
    assert base.layer == 1
    assert repr(base) == f"TreeView(graph={graph!r}, layer=1)"
