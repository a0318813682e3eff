# src/graphtree/helpers/gb.py
from __future__ import annotations

import numpy as np
from graphblas import Vector, Matrix, dtypes, semiring, unary


def pattern_indices(v: Vector) -> np.ndarray:
    """
    Indices of the stored non-zero entries of `v`, ascending.

    Explicit zeros (e.g. from dense construction) are not edges.
    """
    idx, vals = v.to_coo()
    if idx.size == 0:
        return np.empty(0, dtype=np.int64)
    return idx[vals != 0].astype(np.int64, copy=False)


def has_self_loop(M: Matrix) -> bool:
    if M.nrows != M.ncols:
        raise ValueError("Adjacency matrix must be square")
    diag = M.diag()
    return pattern_indices(diag).size > 0


def matrix_has_cycle(M: Matrix) -> bool:
    """
    Return True iff the directed graph represented by adjacency matrix M
    contains a directed cycle (including self-loops).

    - Any non-zero entry is treated as an edge (pattern-only).
    - Sources (indegree 0 among the remaining vertices) are peeled off
      repeatedly; whatever cannot be peeled lies on or behind a cycle.
    """
    n = M.nrows
    if M.ncols != n:
        raise ValueError("Adjacency matrix must be square")

    A = M.select("!=", 0).apply(unary.one).new(dtype=dtypes.INT64)

    remaining = np.ones(n, dtype=bool)
    while remaining.any():
        alive_idx = np.flatnonzero(remaining)
        alive = Vector.from_coo(
            alive_idx,
            np.ones(alive_idx.size, dtype=np.int64),
            size=n,
            dtype=dtypes.INT64,
        )
        # indegree counted over edges whose source is still alive
        indeg = semiring.plus_times(alive @ A).new().to_dense(fill_value=0)
        sources = remaining & (indeg == 0)
        if not sources.any():
            return True
        remaining &= ~sources

    return False
