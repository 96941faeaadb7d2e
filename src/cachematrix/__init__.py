"""cachematrix — a matrix that computes its inverse once.

Quick start::

    import numpy as np
    from cachematrix import make_cache_matrix, cache_solve

    m = make_cache_matrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    inv = cache_solve(m)      # computed, then cached
    m.set_value(np.eye(2))    # cache cleared
"""

from .config import resolve_backend
from .matrix import CacheableMatrix, make_cache_matrix
from .solve import cache_solve, invert, list_backends

__all__ = [
    "CacheableMatrix",
    "cache_solve",
    "invert",
    "list_backends",
    "make_cache_matrix",
    "resolve_backend",
]
