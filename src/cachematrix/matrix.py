"""A matrix that can hold its own inverse.

``CacheableMatrix`` pairs a matrix value with an optional cached inverse.
Replacing the value always drops the cached inverse, so the two never refer
to different matrices.  Computing the inverse is left to
:func:`cachematrix.solve.cache_solve`.

Both fields hold read-only private copies: changing the array a caller
passed in, or trying to write to one handed out, never alters the cache.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .utils import owned_readonly


def _placeholder() -> np.ndarray:
    return owned_readonly(np.empty((0, 0), dtype=np.float64))


class CacheableMatrix:
    """Matrix value plus a cached inverse for the current value.

    No shape validation is performed: any array-like is accepted and any
    inverse may be stored.  Callers that store an inverse are responsible for
    it matching the current value.
    """

    def __init__(self, x: Any = None) -> None:
        self._value = _placeholder() if x is None else owned_readonly(x)
        self._inverse: np.ndarray | None = None

    def set_value(self, m: Any) -> None:
        """Replace the matrix and start a new epoch with an empty cache."""
        self._value = owned_readonly(m)
        self._inverse = None

    def get_value(self) -> np.ndarray:
        return self._value

    def set_cached_inverse(self, inverse: Any) -> None:
        """Store a copy of ``inverse`` as the cached inverse of the current value."""
        self._inverse = owned_readonly(inverse)

    def get_cached_inverse(self) -> np.ndarray | None:
        return self._inverse

    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        state = "cached" if self.has_cached_inverse() else "not cached"
        return f"CacheableMatrix(shape={self._value.shape}, inverse={state})"


def make_cache_matrix(x: Any = None) -> CacheableMatrix:
    """Create a ``CacheableMatrix`` holding ``x`` (default: empty 0x0 matrix)."""
    return CacheableMatrix(x)
