"""Randomized depth-first backtracking maze generator."""

from __future__ import annotations

import logging
import random
import time
from typing import Iterator, List, Optional, Tuple

from ..base import DIRECTIONS, CellState, MazeGrid, Point

CARVE_START = Point(1, 1)
STEP = 2


class MazeGenerator:
    """Carve a perfect maze into a :class:`MazeGrid`.

    The random source is injectable so a fixed seed yields a fixed maze.
    Without one, a ``random.Random`` is seeded from the clock and the seed is
    kept on ``self.seed`` for replaying a run.
    """

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if rng is None:
            if seed is None:
                seed = time.time_ns()
            rng = random.Random(seed)
        self.seed = seed
        self._rng = rng

    def generate(self, grid: MazeGrid) -> MazeGrid:
        if grid.count(CellState.WALL) != grid.width * grid.height:
            raise ValueError("generate expects a fresh all-wall grid")
        logging.debug(f"Carving {grid.width}x{grid.height} maze (seed={self.seed})")
        self._carve(grid, CARVE_START)
        grid.set(grid.entrance, CellState.PATH)
        grid.set(grid.exit, CellState.PATH)
        return grid

    # ------------------------------------------------------------------

    def _shuffled_directions(self) -> Iterator[Tuple[int, int]]:
        directions = list(DIRECTIONS)
        self._rng.shuffle(directions)
        return iter(directions)

    def _carve(self, grid: MazeGrid, start: Point) -> None:
        # Each frame holds the cell and the directions it has not tried yet,
        # so draws happen in the same order as the recursive formulation.
        grid.set(start, CellState.PATH)
        stack: List[Tuple[Point, Iterator[Tuple[int, int]]]] = [
            (start, self._shuffled_directions())
        ]
        while stack:
            (x, y), directions = stack[-1]
            step = next(directions, None)
            if step is None:
                stack.pop()
                continue
            dx, dy = step
            nx, ny = x + dx * STEP, y + dy * STEP
            if grid.is_inside(nx, ny) and grid.cells[ny, nx] == CellState.WALL:
                grid.set(Point(x + dx, y + dy), CellState.PATH)
                target = Point(nx, ny)
                grid.set(target, CellState.PATH)
                stack.append((target, self._shuffled_directions()))


__all__ = ["MazeGenerator"]
