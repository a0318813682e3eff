# src/graphtree/graph/core.py
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import numpy as np
import graphblas as gb
from graphblas import Matrix, Vector

from graphtree.helpers import has_self_loop, matrix_has_cycle, pattern_indices
from .graph_mask import GraphMask


class Graph:
    """
    Layered directed graph backed by python-graphblas.

    Structure:
      - Vertices are 0..num_vertices-1; a vertex's id is its index.
      - Layers: adjacency Matrix per layer_idx (directed, weighted).
            layer[i, j] != 0  means an edge i -> j
      - Optional vertex mask: Vector[BOOL] (wrapped as GraphMask). Masked-out
        vertices do not exist for vertices(), count_vertices(), successors()
        and predecessors(); the layer matrices themselves are never resized.

    The graph is the read-only collaborator of the tree views in
    `graphtree.tree` and implements `graphtree.graph.protocol.GraphLike`.
    """

    __slots__ = (
        "_layers",
        "num_vertices",
        "_mask",  # GraphMask | None
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        layers: Tuple[Matrix, ...],
        num_vertices: int,
        *,
        mask: Optional[Vector] = None,
    ) -> None:
        self._layers: Tuple[Matrix, ...] = tuple(layers)

        self.num_vertices = int(num_vertices)
        self.validate(check_cycles=False)

        self._mask: Optional[GraphMask] = None
        if mask is not None:
            self.set_mask(mask)

    @classmethod
    def from_edges(
        cls,
        edge_layers: Mapping[int, tuple[np.ndarray, np.ndarray, np.ndarray]],
        *,
        num_vertices: int,
    ) -> Graph:
        """
        Build a Graph from per-layer edge arrays.

        edge_layers:
            mapping layer_idx -> (source_vertex_indices, target_vertex_indices, weights)
        num_vertices:
            total number of vertices (0..num_vertices-1)

        Parallel edges (the same (source, target) pair twice in a layer) are
        rejected by GraphBLAS with a ValueError. Without any edge data a
        non-empty graph gets a single empty layer 0.
        """
        num_vertices = int(num_vertices)

        layers_dict: Dict[int, Matrix] = {}
        for layer_idx, (src, dst, w) in edge_layers.items():
            src_arr = np.asarray(src, dtype=np.int64)
            dst_arr = np.asarray(dst, dtype=np.int64)
            val_arr = np.asarray(w)

            mat = gb.Matrix.from_coo(
                src_arr,
                dst_arr,
                val_arr,
                nrows=num_vertices,
                ncols=num_vertices,
            )
            layers_dict[int(layer_idx)] = mat

        num_layers = len(layers_dict)
        for idx in layers_dict:
            if idx < 0 or idx >= num_layers:
                raise ValueError("Layer indices must be contiguous.")

        layers = tuple(layers_dict[i] for i in range(num_layers))
        if not layers and num_vertices > 0:
            # edgeless graph: layer 0 still exists, it just holds no edges
            layers = (gb.Matrix(gb.dtypes.FP64, nrows=num_vertices, ncols=num_vertices),)

        return cls(layers=layers, num_vertices=num_vertices)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[int, int]],
        *,
        num_vertices: int,
    ) -> Graph:
        """Build a single-layer, unit-weight Graph from (source, target) pairs."""
        arr = np.asarray(list(pairs), dtype=np.int64).reshape(-1, 2)
        weights = np.ones(arr.shape[0], dtype=np.float64)
        return cls.from_edges({0: (arr[:, 0], arr[:, 1], weights)}, num_vertices=num_vertices)

    def validate(self, check_cycles: bool = True) -> None:
        for idx, layer in enumerate(self._layers):
            if layer.ncols != self.num_vertices:
                raise ValueError(f"Matrix layer {idx} has invalid number of columns.")
            if layer.nrows != self.num_vertices:
                raise ValueError(f"Matrix layer {idx} has invalid number of rows.")
            if has_self_loop(layer):
                raise ValueError(f"Matrix layer {idx} has self loops.")
            if check_cycles:
                if matrix_has_cycle(layer):
                    raise ValueError(f"Matrix layer {idx} appears to have cycles.")

    # ------------------------------------------------------------------ #
    # Mask handling (public API: Vector; internal: GraphMask)
    # ------------------------------------------------------------------ #
    def set_mask(self, mask_vector: Optional[Vector]) -> None:
        """
        Set or clear the vertex mask.

        - mask_vector is a GraphBLAS Vector[BOOL] of size num_vertices.
        """
        if mask_vector is None:
            self._mask = None
            return

        if mask_vector.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"Mask vector must have BOOL dtype, got {mask_vector.dtype!r}")
        if mask_vector.size != self.num_vertices:
            raise ValueError(
                f"Mask size ({mask_vector.size}) must match num_vertices ({self.num_vertices})"
            )

        self._mask = GraphMask(mask_vector)

    @property
    def mask_vector(self) -> Optional[Vector]:
        """Return the underlying GraphBLAS mask vector, if any."""
        if self._mask is None:
            return None
        return self._mask.vector

    @property
    def graph_mask(self) -> Optional[GraphMask]:
        return self._mask

    # ------------------------------------------------------------------ #
    # Vertex enumeration (GraphLike)
    # ------------------------------------------------------------------ #
    def vertices(self) -> List[int]:
        """Active vertex indices in ascending order."""
        if self._mask is None:
            return list(range(self.num_vertices))
        return [int(i) for i in self._mask.indices()]

    def count_vertices(self) -> int:
        if self._mask is None:
            return self.num_vertices
        return self._mask.count()

    def is_empty(self) -> bool:
        return self.count_vertices() == 0

    def has_vertex(self, vertex_index: int) -> bool:
        if not (0 <= vertex_index < self.num_vertices):
            return False
        return self._mask is None or vertex_index in self._mask

    @staticmethod
    def vertex_id(vertex_index: int) -> int:
        return int(vertex_index)

    # ------------------------------------------------------------------ #
    # Adjacency (GraphLike)
    # ------------------------------------------------------------------ #
    def successors(self, vertex_index: int, layer: int = 0) -> List[int]:
        """Active targets of the outgoing edges of vertex_index, ascending."""
        return self._neighbours(self.get_out_edges(layer, vertex_index))

    def predecessors(self, vertex_index: int, layer: int = 0) -> List[int]:
        """Active sources of the incoming edges of vertex_index, ascending."""
        return self._neighbours(self.get_in_edges(layer, vertex_index))

    def _neighbours(self, edges: Vector) -> List[int]:
        if self._mask is not None:
            edges = edges.dup(mask=self._mask.vector.V)
        return [int(i) for i in pattern_indices(edges)]

    # ------------------------------------------------------------------ #
    # Structural accessors
    # ------------------------------------------------------------------ #
    @property
    def layers(self) -> Tuple[Matrix, ...]:
        """
        Read-only view of the internal layer sequence.
        """
        return self._layers

    @property
    def num_layers(self) -> int:
        return len(self._layers)

    def get_matrix(self, layer: int) -> Matrix:
        """Return the full adjacency matrix for a layer (no masking applied)."""
        self._check_layer(layer)
        return self._layers[layer]

    def get_out_edges(self, layer: int, vertex_index: int) -> Vector:
        """Return outgoing edges of vertex_index as a Vector."""
        mat = self.get_matrix(layer)
        self._check_vertex(vertex_index)
        return mat[int(vertex_index), :].new()

    def get_in_edges(self, layer: int, vertex_index: int) -> Vector:
        """Return incoming edges of vertex_index as a Vector."""
        mat = self.get_matrix(layer)
        self._check_vertex(vertex_index)
        return mat[:, int(vertex_index)].new()

    def _check_layer(self, layer: int) -> None:
        if not (0 <= layer < len(self._layers)):
            raise IndexError(f"layer {layer} out of range [0, {len(self._layers)})")

    def _check_vertex(self, vertex_index: int) -> None:
        if not (0 <= vertex_index < self.num_vertices):
            raise IndexError(f"vertex_index {vertex_index} out of range [0, {self.num_vertices})")

    # ------------------------------------------------------------------ #
    # Graph view
    # ------------------------------------------------------------------ #
    def get_view(self, mask: Vector | None = None) -> Graph:
        """
        Return a shallow view of this graph sharing structure,
        but with an optional different GraphMask.
        """
        mask_vec: Vector | None
        if mask is None:
            mask_vec = self._mask.vector if self._mask is not None else None
        else:
            mask_vec = mask

        return Graph(
            layers=self._layers,
            num_vertices=self.num_vertices,
            mask=mask_vec,
        )

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return self.count_vertices()

    def __repr__(self) -> str:
        return (
            f"Graph(num_vertices={self.num_vertices}, "
            f"num_layers={len(self._layers)}, "
            f"masked={self._mask is not None})"
        )
