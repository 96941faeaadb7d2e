"""Memoized matrix inversion.

``cache_solve`` returns the inverse of a :class:`CacheableMatrix`, computing
it at most once per matrix value::

    from cachematrix import make_cache_matrix, cache_solve

    m = make_cache_matrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    inv = cache_solve(m)   # computed and cached
    inv = cache_solve(m)   # returned from the cache

The inversion routine is chosen by name (see :mod:`cachematrix.config`).
Inversion errors, e.g. ``numpy.linalg.LinAlgError`` for a singular matrix,
propagate to the caller and leave the cache untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np

from .config import BACKENDS, resolve_backend
from .matrix import CacheableMatrix
from .utils import import_mx, require, to_numpy

logger = logging.getLogger("cachematrix.solve")


def _invert_numpy(a: Any) -> np.ndarray:
    return np.linalg.inv(to_numpy(a))


def _invert_mlx(a: Any) -> np.ndarray:
    mx = import_mx()
    arr = mx.array(to_numpy(a))
    # linalg.inv is only implemented on the CPU stream
    inv = mx.linalg.inv(arr, stream=mx.cpu)
    mx.eval(inv)
    return to_numpy(inv)


_INVERTERS: dict[str, Callable[[Any], np.ndarray]] = {
    "numpy": _invert_numpy,
    "mlx": _invert_mlx,
}
require(tuple(_INVERTERS) == BACKENDS, "inverter table does not match config.BACKENDS")


def list_backends() -> list[str]:
    return list(_INVERTERS)


def invert(a: Any, backend: str | None = None) -> np.ndarray:
    """Invert ``a`` with the named backend (configured default when None)."""
    name = resolve_backend(backend)
    logger.debug("inverting %s matrix with %s backend", getattr(a, "shape", "?"), name)
    return _INVERTERS[name](a)


def cache_solve(x: CacheableMatrix, *args: Any, **kwargs: Any) -> np.ndarray:
    """Return the inverse of ``x``, from its cache when available.

    Extra arguments are accepted and ignored.
    """
    del args, kwargs

    inverse = x.get_cached_inverse()
    if inverse is not None:
        logger.info("returning cached inverse")
        return inverse

    logger.info("inverse is not cached - calculating it now")
    data = x.get_value()
    x.set_cached_inverse(invert(data))
    return x.get_cached_inverse()
