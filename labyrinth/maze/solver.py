"""Breadth-first maze solver that marks explored cells on the grid."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..base import DIRECTIONS, CellState, MazeGrid, Point


@dataclass
class MazeSolution:
    solved: bool
    visited: int
    path: List[Point] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "solved": self.solved,
            "visited": self.visited,
            "path": [list(point) for point in self.path],
        }


class MazeSolver:
    """Search from the entrance to the exit, promoting reached cells to VISITED.

    The search stops as soon as the exit is discovered, so the grid ends up
    holding every cell explored up to that moment rather than just the route.
    The route itself is rebuilt from parent pointers into
    :attr:`MazeSolution.path`.
    """

    def solve(self, grid: MazeGrid) -> MazeSolution:
        start = grid.entrance
        grid.set(start, CellState.VISITED)
        queue: deque[Point] = deque([start])
        parents: Dict[Point, Optional[Point]] = {start: None}

        while queue:
            current = queue.popleft()
            for dx, dy in DIRECTIONS:
                neighbor = Point(current.x + dx, current.y + dy)
                if neighbor == grid.exit:
                    grid.set(neighbor, CellState.VISITED)
                    parents[neighbor] = current
                    logging.debug(f"Reached exit after visiting {len(parents)} cells")
                    return MazeSolution(
                        solved=True,
                        visited=len(parents),
                        path=self._trace(parents, neighbor),
                    )
                if grid.is_inside(*neighbor) and grid.get(neighbor) == CellState.PATH:
                    grid.set(neighbor, CellState.VISITED)
                    parents[neighbor] = current
                    queue.append(neighbor)

        logging.debug(f"Frontier exhausted after visiting {len(parents)} cells")
        return MazeSolution(solved=False, visited=len(parents))

    def _trace(self, parents: Dict[Point, Optional[Point]], goal: Point) -> List[Point]:
        node: Optional[Point] = goal
        result: List[Point] = []
        while node is not None:
            result.append(node)
            node = parents[node]
        result.reverse()
        return result


__all__ = ["MazeSolver", "MazeSolution"]
