"""Environment-driven settings.

Configuration env vars:

- ``CACHEMATRIX_BACKEND`` — inversion backend used by ``cache_solve``
  (``numpy`` by default, or ``mlx``)

Explicit arguments always win over the environment.
"""

from __future__ import annotations

import os

from .utils import require

ENV_BACKEND = "CACHEMATRIX_BACKEND"
DEFAULT_BACKEND = "numpy"
BACKENDS = ("numpy", "mlx")


def _parse_choice_env(name: str, choices: tuple[str, ...]) -> str | None:
    raw = os.environ.get(name, "").strip().lower()
    if raw == "":
        return None
    require(
        raw in choices,
        f"Invalid {name}={raw!r}; expected one of {', '.join(choices)}.",
    )
    return raw


def resolve_backend(backend: str | None = None) -> str:
    """Return the backend name to use.

    ``backend`` takes precedence; otherwise ``CACHEMATRIX_BACKEND`` is read,
    falling back to ``numpy``.
    """
    if backend is not None:
        name = backend.strip().lower()
        require(
            name in BACKENDS,
            f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}.",
        )
        return name

    name = _parse_choice_env(ENV_BACKEND, BACKENDS)
    if name is None:
        return DEFAULT_BACKEND
    return name
