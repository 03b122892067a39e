"""Maze generation, solving and rendering package."""

__all__ = [
    "MazeGenerator",
    "MazeSolver",
    "MazeSolution",
    "render_text",
    "render_image",
]

from .generator import MazeGenerator
from .solver import MazeSolver, MazeSolution
from .renderer import render_text, render_image
