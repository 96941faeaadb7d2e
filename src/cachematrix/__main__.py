"""CLI for the inverse cache.

Usage::

    python -m cachematrix demo [--backend numpy|mlx] [-v]
    python -m cachematrix backends
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

import numpy as np

from .config import ENV_BACKEND
from .demo import run_checks
from .solve import list_backends


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m cachematrix",
        description="Exercise the memoized matrix inverse.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    demo_p = sub.add_parser("demo", help="Run the cache self-check scenario")
    demo_p.add_argument("--backend", choices=list_backends(), default=None,
                        help="Inversion backend (default: $CACHEMATRIX_BACKEND or numpy)")
    demo_p.add_argument("-v", "--verbose", action="store_true",
                        help="Log cache hits and misses to stderr")

    sub.add_parser("backends", help="List inversion backends")

    args = parser.parse_args(argv)

    if args.command == "backends":
        for name in list_backends():
            print(f"  {name}")
        return 0

    if args.command == "demo":
        if args.verbose:
            logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
        previous = os.environ.get(ENV_BACKEND)
        if args.backend is not None:
            os.environ[ENV_BACKEND] = args.backend
        failed = 0
        try:
            for check in run_checks():
                print(check.line())
                failed += not check.passed
        # MLX reports a singular matrix as RuntimeError from its LU step
        except (np.linalg.LinAlgError, RuntimeError, ModuleNotFoundError, ValueError) as exc:
            print(f"Demo failed: {exc}", file=sys.stderr)
            return 1
        finally:
            if args.backend is not None:
                if previous is None:
                    os.environ.pop(ENV_BACKEND, None)
                else:
                    os.environ[ENV_BACKEND] = previous
        return 1 if failed else 0

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
