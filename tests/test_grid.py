import unittest

from mazesearch.grid import CellState, Grid, GridBoundsError

SMALL_MAZE = """
S.#
#.#
..E
"""


class GridAccessTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid(3, 3, (0, 0), (2, 2))

    def test_new_grid_stamps_endpoints(self) -> None:
        self.assertIs(self.grid.get(0, 0), CellState.START)
        self.assertIs(self.grid.get(2, 2), CellState.END)
        self.assertEqual(self.grid.count(CellState.UNEXPLORED), 7)

    def test_set_then_get(self) -> None:
        self.grid.set(1, 2, CellState.WALL)
        self.assertIs(self.grid.get(1, 2), CellState.WALL)
        self.assertIs(self.grid.get(2, 1), CellState.UNEXPLORED)

    def test_either_axis_out_of_range_is_rejected(self) -> None:
        for x, y in [(3, 0), (0, 3), (3, 3), (-1, 0), (0, -1), (5, 1)]:
            with self.subTest(x=x, y=y):
                with self.assertRaises(GridBoundsError):
                    self.grid.get(x, y)
                with self.assertRaises(GridBoundsError):
                    self.grid.set(x, y, CellState.EXPLORED)

    def test_bounds_error_is_an_index_error(self) -> None:
        with self.assertRaises(IndexError):
            self.grid.get(0, 10)

    def test_invalid_construction(self) -> None:
        with self.assertRaises(ValueError):
            Grid(0, 3, (0, 0), (0, 0))
        with self.assertRaises(ValueError):
            Grid(3, 3, (0, 0), (3, 0))
        with self.assertRaises(ValueError):
            Grid(2, 2, (0, 0), (1, 1), [CellState.UNEXPLORED] * 3)


class GridRelabelTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.from_text(SMALL_MAZE)

    def test_reset_explored_only_touches_search_marks(self) -> None:
        self.grid.set(1, 0, CellState.EXPLORED)
        self.grid.set(1, 1, CellState.PATH)
        self.grid.reset_explored()
        self.assertIs(self.grid.get(1, 0), CellState.UNEXPLORED)
        self.assertIs(self.grid.get(1, 1), CellState.UNEXPLORED)
        self.assertIs(self.grid.get(0, 0), CellState.START)
        self.assertIs(self.grid.get(2, 2), CellState.END)
        self.assertEqual(self.grid.count(CellState.WALL), 3)

    def test_trace_path_replaces_exploration_trail(self) -> None:
        self.grid.set(1, 0, CellState.EXPLORED)
        self.grid.set(0, 2, CellState.EXPLORED)
        self.grid.trace_path([(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)])
        self.assertEqual(self.grid.to_text(), "S*#\n#*#\n.*E")

    def test_open_neighbors_skip_walls_and_edges(self) -> None:
        self.assertEqual(self.grid.open_neighbors(1, 1), [(1, 2), (1, 0)])
        self.assertEqual(self.grid.open_neighbors(0, 0), [(1, 0)])

    def test_open_neighbors_order_is_down_up_right_left(self) -> None:
        grid = Grid(3, 3, (0, 0), (2, 2))
        self.assertEqual(grid.open_neighbors(1, 1), [(1, 2), (1, 0), (2, 1), (0, 1)])


class GridTextTests(unittest.TestCase):
    def test_text_round_trip(self) -> None:
        grid = Grid.from_text(SMALL_MAZE)
        self.assertEqual(grid.start, (0, 0))
        self.assertEqual(grid.end, (2, 2))
        self.assertEqual(grid.to_text(), SMALL_MAZE.strip())

    def test_single_cell_text(self) -> None:
        grid = Grid.from_text("S")
        self.assertEqual(grid.start, grid.end)
        self.assertIs(grid.get(0, 0), CellState.START)

    def test_malformed_text(self) -> None:
        for text in ["...", "S..\nE.", "SS.\n..E", "S.E\n..E", "S.?\n..E", "S.\n.."]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    Grid.from_text(text)

    def test_to_array_is_row_major(self) -> None:
        grid = Grid.from_text("S.#.\n...E")
        array = grid.to_array()
        self.assertEqual(array.shape, (2, 4))
        self.assertEqual(int(array[0, 2]), CellState.WALL.value)
        self.assertEqual(int(array[1, 3]), CellState.END.value)

    def test_copy_is_independent(self) -> None:
        grid = Grid.from_text(SMALL_MAZE)
        clone = grid.copy()
        clone.set(1, 0, CellState.EXPLORED)
        self.assertIs(grid.get(1, 0), CellState.UNEXPLORED)


if __name__ == "__main__":
    unittest.main()
