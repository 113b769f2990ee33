"""Randomized recursive-backtracker maze generator."""

from __future__ import annotations

import argparse
import logging
import random
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .grid import DIRECTIONS, CellState, Coord, Grid

logger = logging.getLogger(__name__)

# Lattice cells sit on even coordinates; the odd cell between two of them is the wall.
CARVE_DIRECTIONS: Tuple[Coord, ...] = ((2, 0), (-2, 0), (0, 2), (0, -2))


class MazeGenerator:
    """Build connected mazes on a ``width`` x ``height`` grid.

    Randomness comes from ``rng`` when given, otherwise from a
    ``random.Random(seed)``; the same seed always yields the same maze.
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 30,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random(seed)

    def generate(self) -> Grid:
        walls = [True] * (self.width * self.height)
        start = (
            2 * self._rng.randrange((self.width + 1) // 2),
            2 * self._rng.randrange((self.height + 1) // 2),
        )
        self.carve(walls, start)
        end = self.select_endpoint(walls, start)
        if end == start and self.width * self.height > 1:
            end = self._open_adjacent(walls, start)

        cells = [CellState.WALL if wall else CellState.UNEXPLORED for wall in walls]
        cells[self._index(end)] = CellState.END
        cells[self._index(start)] = CellState.START
        logger.debug("Generated %dx%d maze, start=%s end=%s", self.width, self.height, start, end)
        return Grid(self.width, self.height, start, end, cells)

    # ------------------------------------------------------------------

    def carve(self, walls: List[bool], start: Coord) -> None:
        """Carve passages into ``walls`` in place, starting from ``start``.

        Iterative form of the recursive backtracker: every frame shuffles its
        directions when it is entered and then tries them in order, so the
        carve order matches the recursive version for the same random state.
        """

        walls[self._index(start)] = False
        stack: List[Tuple[Coord, Iterator[Coord]]] = [(start, self._shuffled_directions())]
        while stack:
            (x, y), directions = stack[-1]
            for dx, dy in directions:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < self.width and 0 <= ny < self.height):
                    continue
                if walls[self._index((nx, ny))]:
                    walls[self._index((x + dx // 2, y + dy // 2))] = False
                    walls[self._index((nx, ny))] = False
                    stack.append(((nx, ny), self._shuffled_directions()))
                    break
            else:
                stack.pop()

    def select_endpoint(self, walls: List[bool], start: Coord) -> Coord:
        """Pick an end cell from the farther half of the increasingly-distant BFS cells."""

        queue: deque[Tuple[Coord, int]] = deque([(start, 0)])
        visited = {start}
        candidates: List[Coord] = []
        max_distance = 0
        while queue:
            point, distance = queue.popleft()
            if distance > max_distance:
                max_distance = distance
                candidates.append(point)
            x, y = point
            for dx, dy in DIRECTIONS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < self.width and 0 <= ny < self.height):
                    continue
                if (nx, ny) in visited or walls[self._index((nx, ny))]:
                    continue
                visited.add((nx, ny))
                queue.append(((nx, ny), distance + 1))

        if not candidates:
            return start
        candidates.sort(key=lambda p: abs(p[0] - start[0]) + abs(p[1] - start[1]))
        farther_half = candidates[len(candidates) // 2 :]
        return self._rng.choice(farther_half)

    # ------------------------------------------------------------------

    def _open_adjacent(self, walls: List[bool], start: Coord) -> Coord:
        # Only reachable when the lattice holds a single cell, e.g. 2x1 or 2x2.
        directions = list(DIRECTIONS)
        self._rng.shuffle(directions)
        for dx, dy in directions:
            nx, ny = start[0] + dx, start[1] + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                walls[self._index((nx, ny))] = False
                return (nx, ny)
        raise RuntimeError("Start cell has no in-bounds neighbor")

    def _shuffled_directions(self) -> Iterator[Coord]:
        directions = list(CARVE_DIRECTIONS)
        self._rng.shuffle(directions)
        return iter(directions)

    def _index(self, point: Coord) -> int:
        return point[1] * self.width + point[0]


__all__ = ["MazeGenerator", "CARVE_DIRECTIONS"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and print it as text")
    parser.add_argument("--width", type=int, default=30)
    parser.add_argument("--height", type=int, default=30)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    grid = MazeGenerator(args.width, args.height, seed=args.seed).generate()
    print(grid.to_text())


if __name__ == "__main__":
    main()
