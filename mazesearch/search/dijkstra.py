"""Dijkstra's algorithm with unit edge costs."""

from __future__ import annotations

import heapq
from typing import Dict, List, Set, Tuple

from ..base import AbstractSearchStrategy
from ..grid import Coord, Grid


class Dijkstra(AbstractSearchStrategy):
    """Uniform-cost search over the open cells of a grid.

    Every move costs 1. Each relaxation records the predecessor alongside the
    distance, and :meth:`get_path` walks those predecessors back from the end
    cell. Duplicate heap entries left behind by earlier relaxations are
    skipped when popped.
    """

    name = "dijkstra"

    def __init__(self, grid: Grid) -> None:
        super().__init__(grid)
        self._heap: List[Tuple[int, Coord]] = [(0, self.start)]
        self._distances: Dict[Coord, int] = {self.start: 0}
        self._came_from: Dict[Coord, Coord] = {}
        self._settled: Set[Coord] = set()
        self._solved = False

    def step(self, grid: Grid) -> None:
        if not self._can_step():
            return
        distance, cell = heapq.heappop(self._heap)
        if cell in self._settled:
            return
        if cell == self.end:
            self._solved = True
            return

        self._settled.add(cell)
        self._mark_explored(grid, cell)
        next_cost = distance + 1
        for neighbor in grid.open_neighbors(*cell):
            if neighbor in self._distances and next_cost >= self._distances[neighbor]:
                continue
            self._distances[neighbor] = next_cost
            self._came_from[neighbor] = cell
            heapq.heappush(self._heap, (next_cost, neighbor))

    def get_path(self, grid: Grid) -> List[Coord]:
        if not self._solved:
            return []
        path = [self.end]
        while path[-1] != self.start:
            path.append(self._came_from[path[-1]])
        path.reverse()
        return path

    def is_solved(self) -> bool:
        return self._solved

    def frontier_size(self) -> int:
        return len(self._heap)

    def distance_to(self, cell: Coord) -> int:
        """Best known distance from start to ``cell``."""

        try:
            return self._distances[cell]
        except KeyError as exc:
            raise KeyError(f"Cell {cell} has not been reached") from exc


__all__ = ["Dijkstra"]
