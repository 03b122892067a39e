import unittest

from labyrinth import CellState, MazeGrid, Point


class MazeGridTests(unittest.TestCase):
    def test_new_grid_is_all_wall(self) -> None:
        grid = MazeGrid(7, 9)
        self.assertEqual(grid.cells.shape, (9, 7))
        self.assertEqual(grid.count(CellState.WALL), 63)

    def test_even_dimensions_are_rounded_up(self) -> None:
        grid = MazeGrid(8, 10)
        self.assertEqual(grid.shape, (9, 11))
        self.assertEqual(grid.exit, Point(7, 10))

    def test_too_small_dimensions_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MazeGrid(3, 7)
        with self.assertRaises(ValueError):
            MazeGrid(7, 4)

    def test_openings_are_fixed(self) -> None:
        grid = MazeGrid(11, 5)
        self.assertEqual(grid.entrance, Point(1, 0))
        self.assertEqual(grid.exit, Point(9, 4))

    def test_is_inside_excludes_outer_ring(self) -> None:
        grid = MazeGrid(5, 7)
        self.assertTrue(grid.is_inside(1, 1))
        self.assertTrue(grid.is_inside(3, 5))
        self.assertFalse(grid.is_inside(0, 3))
        self.assertFalse(grid.is_inside(4, 3))
        self.assertFalse(grid.is_inside(2, 0))
        self.assertFalse(grid.is_inside(2, 6))
        self.assertFalse(grid.is_inside(-1, 3))
        self.assertFalse(grid.is_inside(2, 7))

    def test_get_and_set_use_x_y_order(self) -> None:
        grid = MazeGrid(7, 5)
        grid.set(Point(5, 1), CellState.PATH)
        self.assertEqual(grid.cells[1, 5], CellState.PATH)
        self.assertEqual(grid.get(Point(5, 1)), CellState.PATH)
        self.assertEqual(grid.get(Point(1, 1)), CellState.WALL)

    def test_equality_compares_cells(self) -> None:
        first = MazeGrid(5, 5)
        second = MazeGrid(5, 5)
        self.assertEqual(first, second)
        second.set(Point(1, 1), CellState.PATH)
        self.assertNotEqual(first, second)
        self.assertNotEqual(MazeGrid(5, 5), MazeGrid(5, 7))

    def test_to_dict(self) -> None:
        grid = MazeGrid(5, 5)
        payload = grid.to_dict()
        self.assertEqual(payload["grid_size"], [5, 5])
        self.assertEqual(payload["entrance"], [1, 0])
        self.assertEqual(payload["exit"], [3, 4])
        self.assertEqual(len(payload["cells"]), 5)
        self.assertTrue(all(len(row) == 5 for row in payload["cells"]))


if __name__ == "__main__":
    unittest.main()
