# src/graphtree/graph/graph_mask.py
from __future__ import annotations

from typing import Iterable

import numpy as np
import graphblas as gb
from graphblas import Vector


class GraphMask:
    """
    A boolean vertex mask restricting a Graph view to a vertex subset.

    - Wraps a python-graphblas Vector[BOOL] of size num_vertices.
    - A vertex is active iff the mask holds a True value at its index;
      missing entries and explicit False values are both inactive.
    - Intended to be short-lived (no longer than the associated Graph).
    """

    __slots__ = ("vector",)

    def __init__(self, vector: Vector) -> None:
        if vector.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"GraphMask vector must have BOOL dtype, got {vector.dtype!r}")
        self.vector = vector

    @classmethod
    def from_indices(cls, indices: Iterable[int], size: int) -> GraphMask:
        idx = np.fromiter((int(i) for i in indices), dtype=np.int64)
        if idx.size and ((idx < 0).any() or (idx >= size).any()):
            raise IndexError(f"Mask indices must be in [0, {size})")
        vec = Vector.from_coo(
            idx,
            np.ones(idx.size, dtype=bool),
            size=size,
            dtype=gb.dtypes.BOOL,
            dup_op=gb.binary.lor,
        )
        return cls(vec)

    @property
    def size(self) -> int:
        return self.vector.size

    def indices(self) -> np.ndarray:
        """Active vertex indices, ascending."""
        idx, vals = self.vector.to_coo()
        return idx[vals.astype(bool, copy=False)].astype(np.int64, copy=False)

    def count(self) -> int:
        return int(self.indices().size)

    def __contains__(self, vertex_index: object) -> bool:
        if not isinstance(vertex_index, (int, np.integer)):
            return False
        if not (0 <= vertex_index < self.vector.size):
            return False
        value = self.vector.get(int(vertex_index))
        return bool(value) if value is not None else False

    def __repr__(self) -> str:
        return f"GraphMask(size={self.size}, active={self.count()})"
