"""Depth-first search carrying the walked path on every stack entry."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from ..base import AbstractSearchStrategy
from ..grid import Coord, Grid


class DepthFirstSearch(AbstractSearchStrategy):
    """LIFO search; finds *a* path, not necessarily the shortest one."""

    name = "dfs"

    def __init__(self, grid: Grid) -> None:
        super().__init__(grid)
        self._stack: List[Tuple[Coord, List[Coord]]] = [(self.start, [self.start])]
        self._visited: Set[Coord] = set()
        self._path: Optional[List[Coord]] = None

    def step(self, grid: Grid) -> None:
        if not self._can_step():
            return
        cell, path = self._stack.pop()
        if cell == self.end:
            self._path = path
            return
        # Cells can be stacked several times before their first expansion.
        if cell in self._visited:
            return

        self._visited.add(cell)
        self._mark_explored(grid, cell)
        for neighbor in grid.open_neighbors(*cell):
            if neighbor not in self._visited:
                self._stack.append((neighbor, path + [neighbor]))

    def get_path(self, grid: Grid) -> List[Coord]:
        return list(self._path) if self._path is not None else []

    def is_solved(self) -> bool:
        return self._path is not None

    def frontier_size(self) -> int:
        return len(self._stack)


__all__ = ["DepthFirstSearch"]
