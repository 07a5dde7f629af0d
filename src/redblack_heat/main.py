#!/usr/bin/env python3
# ------------------------------------------------------------
# Steady-state 2D heat diffusion (red/black relaxation), command line
# ------------------------------------------------------------
# Usage:
#   redblack-heat <width> <height> <steps> [output-file]
#
# Prints:
#   After <n> iterations, delta was <delta>
# ------------------------------------------------------------

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from .config import SimulationConfig, resolve_log_level
from .export import export_grid
from .grid import GridAllocationError
from .simulation import SimulationResult, run_simulation


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        value = 0
    if value <= 0:
        raise argparse.ArgumentTypeError("Sizes must be positive integers")
    return value


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("Steps must be a non-negative integer") from None
    if value < 0:
        raise argparse.ArgumentTypeError("Steps must be non-negative")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="redblack-heat",
        description="Steady-state 2D heat diffusion with a red/black finite-difference relaxation.",
    )
    parser.add_argument("width", type=positive_int, help="Grid width in cells.")
    parser.add_argument("height", type=positive_int, help="Grid height in cells.")
    parser.add_argument("steps", type=non_negative_int, help="Maximum number of half-sweeps.")
    parser.add_argument("output_file", nargs="?", default=None, help="Optional image of the final grid.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig(
        width=args.width,
        height=args.height,
        steps=args.steps,
        output=args.output_file,
    )

    def report(result: SimulationResult) -> None:
        print(f"After {result.steps} iterations, delta was {result.delta:f}", flush=True)

    try:
        run_simulation(config, exporter=export_grid, reporter=report)
    except GridAllocationError as e:
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
