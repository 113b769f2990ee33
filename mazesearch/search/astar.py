"""A* search guided by the Manhattan distance to the end cell."""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Set, Tuple

from ..base import AbstractSearchStrategy
from ..grid import Coord, Grid


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class AStar(AbstractSearchStrategy):
    """A* with an admissible, consistent heuristic for 4-directional unit moves.

    The closed set is kept for inspection only. A neighbor is re-pushed
    whenever a strictly better ``g`` is found for it, so the heap may hold
    stale duplicates; they are expanded harmlessly because no neighbor can be
    improved through them.
    """

    name = "astar"

    def __init__(self, grid: Grid) -> None:
        super().__init__(grid)
        h = manhattan(self.start, self.end)
        self._g_score: Dict[Coord, int] = {self.start: 0}
        self._f_score: Dict[Coord, int] = {self.start: h}
        self._heap: List[Tuple[int, Coord]] = [(h, self.start)]
        self._came_from: Dict[Coord, Coord] = {}
        self.closed_set: Set[Coord] = set()
        self._final: Optional[Coord] = None

    def step(self, grid: Grid) -> None:
        if not self._can_step():
            return
        _, cell = heapq.heappop(self._heap)
        if cell == self.end:
            self._final = cell
            return

        self.closed_set.add(cell)
        self._mark_explored(grid, cell)
        tentative = self._g_score[cell] + 1
        for neighbor in grid.open_neighbors(*cell):
            if tentative >= self._g_score.get(neighbor, tentative + 1):
                continue
            self._came_from[neighbor] = cell
            self._g_score[neighbor] = tentative
            self._f_score[neighbor] = tentative + manhattan(neighbor, self.end)
            heapq.heappush(self._heap, (self._f_score[neighbor], neighbor))

    def get_path(self, grid: Grid) -> List[Coord]:
        if self._final is None:
            return []
        path = [self._final]
        while path[-1] in self._came_from:
            path.append(self._came_from[path[-1]])
        path.reverse()
        return path

    def is_solved(self) -> bool:
        return self._final is not None

    def frontier_size(self) -> int:
        return len(self._heap)


__all__ = ["AStar", "manhattan"]
