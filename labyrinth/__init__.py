"""Random maze generation and breadth-first solving for the console."""

__all__ = [
    "CellState",
    "DIRECTIONS",
    "MIN_SIZE",
    "MazeGrid",
    "Point",
    "MazeGenerator",
    "MazeSolver",
    "MazeSolution",
    "render_text",
    "render_image",
]

from .base import CellState, DIRECTIONS, MIN_SIZE, MazeGrid, Point
from .maze import (
    MazeGenerator,
    MazeSolver,
    MazeSolution,
    render_text,
    render_image,
)
