"""Console entry point: read dimensions, generate, solve and print the maze."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

from ..base import MIN_SIZE, MazeGrid
from .generator import MazeGenerator
from .renderer import render_text
from .solver import MazeSolver

WIDTH_PROMPT = "Enter the maze width (odd): "
HEIGHT_PROMPT = "Enter the maze height (odd): "


class DimensionError(ValueError):
    """Raised when a maze dimension is not a positive integer."""


def parse_dimension(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise DimensionError(f"Expected a whole number, got {raw.strip()!r}") from exc
    if value <= 0:
        raise DimensionError(f"Dimensions must be positive, got {value}")
    return value


def normalize_dimension(value: int) -> int:
    """Round even sizes up to odd and clamp to the smallest usable maze."""

    if value % 2 == 0:
        value += 1
    if value < MIN_SIZE:
        logging.warning(f"Dimension {value} is too small, using {MIN_SIZE}")
        value = MIN_SIZE
    return value


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _argparse_dimension(raw: str) -> int:
    try:
        return parse_dimension(raw)
    except DimensionError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random maze and solve it")
    parser.add_argument("--width", type=_argparse_dimension, default=None, help="Maze width (prompted if omitted)")
    parser.add_argument("--height", type=_argparse_dimension, default=None, help="Maze height (prompted if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    parser.add_argument("--no-color", action="store_true", help="Print visited cells without ANSI colour")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Highlight only the shortest route instead of every explored cell",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    return parser.parse_args(argv)


class _DimensionPrompt:
    """Read whitespace-separated dimensions, carrying extra tokens to the next prompt."""

    def __init__(self, read: Callable[[str], str]) -> None:
        self._read = read
        self._pending: List[str] = []

    def __call__(self, message: str) -> int:
        while not self._pending:
            self._pending = self._read(message).split()
        return parse_dimension(self._pending.pop(0))


def run(
    width: int,
    height: int,
    *,
    seed: Optional[int] = None,
    color: bool = True,
    trace: bool = False,
    out: Optional[TextIO] = None,
) -> bool:
    """Generate, print, solve and print one maze. Returns whether it was solved."""

    if out is None:
        out = sys.stdout
    start = time.perf_counter()
    grid = MazeGrid(width, height)
    generator = MazeGenerator(seed=seed)
    generator.generate(grid)
    out.write(f"Generation time: {_elapsed_ms(start)}ms\n")
    logging.info(f"Generated {grid.width}x{grid.height} maze with seed {generator.seed}")
    out.write(render_text(grid, color=color))

    start = time.perf_counter()
    solution = MazeSolver().solve(grid)
    if not solution.solved:
        out.write("No solution found.\n")
        return False
    out.write(f"Solved in {_elapsed_ms(start)}ms:\n")
    logging.info(f"Visited {solution.visited} cells, route length {len(solution.path)}")
    out.write(render_text(grid, color=color, highlight=solution.path if trace else None))
    return True


def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    prompt = _DimensionPrompt(read)
    try:
        width = args.width if args.width is not None else prompt(WIDTH_PROMPT)
        height = args.height if args.height is not None else prompt(HEIGHT_PROMPT)
    except DimensionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except EOFError:
        print("error: no dimensions given on standard input", file=sys.stderr)
        return 2

    run(
        normalize_dimension(width),
        normalize_dimension(height),
        seed=args.seed,
        color=not args.no_color,
        trace=args.trace,
    )
    return 0


__all__ = ["main", "run", "normalize_dimension", "parse_dimension", "DimensionError"]
