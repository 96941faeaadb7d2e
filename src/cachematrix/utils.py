from __future__ import annotations

from typing import Any

try:
    import numpy as np
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "cachematrix requires numpy. Install with: pip install numpy"
    ) from e


def to_numpy(x: Any) -> np.ndarray:
    """Convert common array types to a NumPy array without copying when possible.

    Supports:
    - numpy.ndarray
    - mlx.core.array (via the buffer protocol)
    - nested lists / tuples of numbers
    - objects implementing __array__
    """
    if isinstance(x, np.ndarray):
        return x
    return np.asarray(x)


def import_mx():
    """Import ``mlx.core`` lazily; MLX is an optional extra."""
    try:
        import mlx.core as mx
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "The mlx backend requires MLX. Install with: pip install cachematrix[mlx]"
        ) from e
    return mx


def owned_readonly(x: Any) -> np.ndarray:
    """Return a read-only private copy of ``x``.

    The copy shares no memory with ``x``, so later writes through the
    caller's reference cannot reach it.
    """
    a = np.array(x, copy=True)
    a.flags.writeable = False
    return a


def require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValueError(msg)
