"""
Shared graph fixtures.

Vertices are integer indices; edges point parent -> child unless a test
says otherwise. Every test runs in its own empty working directory with a
fresh settings cache so that stray config.toml / .env files cannot leak in.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from graphtree.config import clear_settings_cache
from graphtree.graph import Graph


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    for name in ("GRAPHTREE_TREE__DIRECTION", "GRAPHTREE_TREE__LAYER", "GRAPHTREE_LOGGING__LEVEL"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def empty_graph() -> Graph:
    return Graph.from_edges({}, num_vertices=0)


@pytest.fixture
def single_vertex_graph() -> Graph:
    return Graph.from_pairs([], num_vertices=1)


@pytest.fixture
def chain_graph() -> Graph:
    # A=0 -> B=1 -> C=2 -> D=3
    return Graph.from_pairs([(0, 1), (1, 2), (2, 3)], num_vertices=4)


@pytest.fixture
def star_graph() -> Graph:
    # root 0 with children 1..5
    return Graph.from_pairs([(0, i) for i in range(1, 6)], num_vertices=6)


@pytest.fixture
def branching_graph() -> Graph:
    #        0
    #      /   \
    #     1     2
    #    / \     \
    #   3   4     5
    #        \
    #         6
    return Graph.from_pairs(
        [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (4, 6)],
        num_vertices=7,
    )


@pytest.fixture
def two_parents_graph() -> Graph:
    # 0 -> 2 <- 1
    return Graph.from_pairs([(0, 2), (1, 2)], num_vertices=3)


@pytest.fixture
def diamond_graph() -> Graph:
    # 0 -> 1 -> 3, 0 -> 2 -> 3
    return Graph.from_pairs([(0, 1), (0, 2), (1, 3), (2, 3)], num_vertices=4)


@pytest.fixture
def cycle_below_root_graph() -> Graph:
    # 0 -> 1 -> 2 -> 1
    return Graph.from_pairs([(0, 1), (1, 2), (2, 1)], num_vertices=3)


@pytest.fixture
def full_cycle_graph() -> Graph:
    # 0 -> 1 -> 2 -> 0, nobody is parentless
    return Graph.from_pairs([(0, 1), (1, 2), (2, 0)], num_vertices=3)


@pytest.fixture
def detached_cycle_graph() -> Graph:
    # 0 -> 1 plus an unreachable cycle 2 <-> 3
    return Graph.from_pairs([(0, 1), (2, 3), (3, 2)], num_vertices=4)


@pytest.fixture
def forest_graph() -> Graph:
    # two trees: 0 -> 1 and 2 -> 3
    return Graph.from_pairs([(0, 1), (2, 3)], num_vertices=4)
