"""Text and image views of a maze grid."""

from __future__ import annotations

from typing import Iterable, Optional, Set, Tuple, Union

from PIL import Image, ImageDraw

from ..base import CellState, MazeGrid, Point

ENTRANCE_GLYPH = "E"
EXIT_GLYPH = "S"
WALL_GLYPH = "#"
PATH_GLYPH = " "
VISITED_GLYPH = "*"

ANSI_RED = "\033[31m"
ANSI_RESET = "\033[0m"

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
ENTRANCE_COLOR = (220, 30, 30)
EXIT_COLOR = (40, 180, 80)
VISITED_COLOR = (220, 0, 0)

ENTRANCE = "entrance"
EXIT = "exit"


def _classify(
    grid: MazeGrid,
    x: int,
    y: int,
    highlight: Optional[Set[Point]],
) -> Union[str, CellState]:
    point = Point(x, y)
    if point == grid.entrance:
        return ENTRANCE
    if point == grid.exit:
        return EXIT
    state = CellState(int(grid.cells[y, x]))
    if highlight is not None and state == CellState.VISITED:
        # Only the highlighted route keeps the visited look.
        return CellState.VISITED if point in highlight else CellState.PATH
    return state


def render_text(
    grid: MazeGrid,
    *,
    color: bool = False,
    highlight: Optional[Iterable[Point]] = None,
) -> str:
    """Return the maze as newline-terminated rows of single glyphs."""

    visited = f"{ANSI_RED}{VISITED_GLYPH}{ANSI_RESET}" if color else VISITED_GLYPH
    glyphs = {
        ENTRANCE: ENTRANCE_GLYPH,
        EXIT: EXIT_GLYPH,
        CellState.WALL: WALL_GLYPH,
        CellState.PATH: PATH_GLYPH,
        CellState.VISITED: visited,
    }
    marked = set(highlight) if highlight is not None else None
    lines = []
    for y in range(grid.height):
        row = "".join(glyphs[_classify(grid, x, y, marked)] for x in range(grid.width))
        lines.append(row + "\n")
    return "".join(lines)


def render_image(
    grid: MazeGrid,
    *,
    cell_size: int = 16,
    highlight: Optional[Iterable[Point]] = None,
) -> Image.Image:
    """Draw the maze as coloured squares for callers embedding it in other tools.

    This is library API only; the console entry point prints
    :func:`render_text`. Colours follow the glyphs one to one: entrance red,
    exit green, wall black, path white, visited (or ``highlight``) red. The
    image is returned in memory and never written to disk.
    """

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    colors = {
        ENTRANCE: ENTRANCE_COLOR,
        EXIT: EXIT_COLOR,
        CellState.WALL: WALL_COLOR,
        CellState.PATH: PATH_COLOR,
        CellState.VISITED: VISITED_COLOR,
    }
    marked = set(highlight) if highlight is not None else None
    canvas = Image.new("RGB", (grid.width * cell_size, grid.height * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)
    for y in range(grid.height):
        for x in range(grid.width):
            fill: Tuple[int, int, int] = colors[_classify(grid, x, y, marked)]
            left = x * cell_size
            top = y * cell_size
            draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=fill)
    return canvas


__all__ = ["render_text", "render_image"]
