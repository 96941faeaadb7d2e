"""Self-check scenario for the inverse cache.

Builds a cacheable matrix, solves it twice, replaces the value and checks
that every observable step behaves as documented.  Each check yields a line
starting with ``EXPECTED:`` or ``UNEXPECTED:``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from .matrix import make_cache_matrix
from .solve import cache_solve, invert

FIRST_MATRIX = np.array(
    [
        [1.0, 2.0, 3.0],
        [4.0, 4.0, 4.0],
        [3.0, 2.0, 3.0],
    ]
)

SECOND_MATRIX = np.array(
    [
        [6.0, 2.0, 6.0],
        [4.0, 4.0, 4.0],
        [7.0, 2.0, 7.0],
    ]
)


@dataclass(frozen=True)
class Check:
    description: str
    passed: bool

    def line(self) -> str:
        prefix = "EXPECTED" if self.passed else "UNEXPECTED"
        return f"{prefix}: {self.description}"


def _identical(a, b) -> bool:
    return a is not None and b is not None and np.array_equal(a, b)


def run_checks() -> Iterator[Check]:
    """Run the scenario lazily, one check at a time, on the configured backend."""
    raw_inverse = invert(FIRST_MATRIX)
    cache_matrix = make_cache_matrix(FIRST_MATRIX)

    yield Check("get_value() identical to first matrix",
                _identical(cache_matrix.get_value(), FIRST_MATRIX))
    yield Check("get_cached_inverse() is None",
                cache_matrix.get_cached_inverse() is None)

    inverse = cache_solve(cache_matrix)
    yield Check("computed inverse identical to direct inverse",
                _identical(inverse, raw_inverse))
    yield Check("get_cached_inverse() identical to direct inverse",
                _identical(cache_matrix.get_cached_inverse(), raw_inverse))

    again = cache_solve(cache_matrix)
    yield Check("second solve returned the cached object", again is inverse)
    yield Check("get_cached_inverse() still identical to direct inverse",
                _identical(cache_matrix.get_cached_inverse(), raw_inverse))

    cache_matrix.set_value(SECOND_MATRIX)
    yield Check("get_value() identical to second matrix",
                _identical(cache_matrix.get_value(), SECOND_MATRIX))
    yield Check("get_cached_inverse() reset to None",
                cache_matrix.get_cached_inverse() is None)
