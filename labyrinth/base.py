"""Grid data model shared by maze generation, solving and rendering."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, NamedTuple, Tuple

import numpy as np

MIN_SIZE = 5


class CellState(IntEnum):
    WALL = 0
    PATH = 1
    VISITED = 2


class Point(NamedTuple):
    x: int
    y: int


# down, right, up, left in screen coordinates
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class MazeGrid:
    """Rectangular matrix of cell states indexed ``[row][col]``.

    Dimensions are coerced to odd values so that corridors land on odd
    coordinates and the outer ring stays a single wall thick. The entrance
    sits in the top wall at ``(1, 0)`` and the exit in the bottom wall at
    ``(width - 2, height - 1)``.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(f"width and height must be at least {MIN_SIZE}")
        self.width = width if width % 2 == 1 else width + 1
        self.height = height if height % 2 == 1 else height + 1
        self.cells = np.full((self.height, self.width), CellState.WALL, dtype=np.uint8)
        self.entrance = Point(1, 0)
        self.exit = Point(self.width - 2, self.height - 1)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height

    def is_inside(self, x: int, y: int) -> bool:
        """True for interior cells, i.e. anything off the outer wall ring."""

        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def get(self, point: Point) -> CellState:
        return CellState(int(self.cells[point.y, point.x]))

    def set(self, point: Point, state: CellState) -> None:
        self.cells[point.y, point.x] = state

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid_size": [self.width, self.height],
            "entrance": list(self.entrance),
            "exit": list(self.exit),
            "cells": self.cells.tolist(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"


__all__ = [
    "CellState",
    "DIRECTIONS",
    "MIN_SIZE",
    "MazeGrid",
    "Point",
]
