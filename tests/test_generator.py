import random
import unittest

from mazesearch.evaluator import is_connected
from mazesearch.generator import MazeGenerator
from mazesearch.grid import CellState

SIZES = [(1, 1), (2, 1), (1, 2), (2, 2), (3, 3), (4, 4), (5, 7), (10, 10), (31, 17)]


class MazeGeneratorTests(unittest.TestCase):
    def test_every_open_cell_is_reachable_from_start(self) -> None:
        for width, height in SIZES:
            for seed in range(5):
                with self.subTest(width=width, height=height, seed=seed):
                    grid = MazeGenerator(width, height, seed=seed).generate()
                    self.assertTrue(is_connected(grid))

    def test_exactly_one_start_and_end(self) -> None:
        for width, height in SIZES[1:]:
            for seed in range(5):
                with self.subTest(width=width, height=height, seed=seed):
                    grid = MazeGenerator(width, height, seed=seed).generate()
                    self.assertEqual(grid.count(CellState.START), 1)
                    self.assertEqual(grid.count(CellState.END), 1)
                    self.assertNotEqual(grid.start, grid.end)
                    self.assertIs(grid.get(*grid.start), CellState.START)
                    self.assertIs(grid.get(*grid.end), CellState.END)

    def test_single_cell_maze_keeps_start(self) -> None:
        grid = MazeGenerator(1, 1, seed=0).generate()
        self.assertEqual(grid.start, (0, 0))
        self.assertEqual(grid.end, (0, 0))
        self.assertIs(grid.get(0, 0), CellState.START)

    def test_start_sits_on_even_lattice(self) -> None:
        for seed in range(10):
            grid = MazeGenerator(11, 9, seed=seed).generate()
            self.assertEqual(grid.start[0] % 2, 0)
            self.assertEqual(grid.start[1] % 2, 0)

    def test_odd_odd_cells_stay_walls(self) -> None:
        grid = MazeGenerator(11, 11, seed=4).generate()
        for y in range(1, 11, 2):
            for x in range(1, 11, 2):
                self.assertIs(grid.get(x, y), CellState.WALL)

    def test_every_lattice_cell_is_carved(self) -> None:
        grid = MazeGenerator(9, 7, seed=2).generate()
        for y in range(0, 7, 2):
            for x in range(0, 9, 2):
                self.assertIsNot(grid.get(x, y), CellState.WALL)

    def test_same_seed_same_maze(self) -> None:
        first = MazeGenerator(21, 21, seed=42).generate()
        second = MazeGenerator(21, 21, seed=42).generate()
        injected = MazeGenerator(21, 21, rng=random.Random(42)).generate()
        self.assertEqual(first.to_text(), second.to_text())
        self.assertEqual(first.to_text(), injected.to_text())

    def test_different_seeds_vary(self) -> None:
        layouts = {MazeGenerator(21, 21, seed=seed).generate().to_text() for seed in range(5)}
        self.assertGreater(len(layouts), 1)

    def test_large_maze_does_not_recurse(self) -> None:
        grid = MazeGenerator(201, 201, seed=1).generate()
        self.assertEqual(grid.count(CellState.START), 1)

    def test_rejects_empty_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            MazeGenerator(0, 5)
        with self.assertRaises(ValueError):
            MazeGenerator(5, -1)


class MazeGeneratorPhaseTests(unittest.TestCase):
    def test_carve_opens_whole_lattice(self) -> None:
        generator = MazeGenerator(5, 5, seed=3)
        walls = [True] * 25
        generator.carve(walls, (0, 0))
        for y in (0, 2, 4):
            for x in (0, 2, 4):
                self.assertFalse(walls[y * 5 + x])
        # 9 lattice cells joined by 8 passages.
        self.assertEqual(walls.count(False), 17)

    def test_endpoint_comes_from_farther_half(self) -> None:
        for seed in range(20):
            generator = MazeGenerator(5, 1, seed=seed)
            end = generator.select_endpoint([False] * 5, (0, 0))
            self.assertIn(end, [(3, 0), (4, 0)])

    def test_endpoint_of_isolated_start_is_start(self) -> None:
        generator = MazeGenerator(3, 1, seed=0)
        self.assertEqual(generator.select_endpoint([False, True, False], (0, 0)), (0, 0))


if __name__ == "__main__":
    unittest.main()
