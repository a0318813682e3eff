from __future__ import annotations

from .gb import has_self_loop, matrix_has_cycle, pattern_indices

__all__ = [
    "has_self_loop",
    "matrix_has_cycle",
    "pattern_indices",
]
