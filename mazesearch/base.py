"""Abstract interface for incremental maze search strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .grid import CellState, Coord, Grid

logger = logging.getLogger(__name__)


class AbstractSearchStrategy(ABC):
    """Base class for searches that advance one cell per :meth:`step` call.

    A strategy is bound to the start and end of the grid it was created for.
    The driver owns the grid and passes it into every call; strategies keep
    no reference to it. Switching algorithms or regenerating the maze means
    discarding the instance and creating a new one with
    :meth:`new_instance_for`.
    """

    name: str = ""

    def __init__(self, grid: Grid) -> None:
        self.start: Coord = grid.start
        self.end: Coord = grid.end
        self.traversed_cells = 0
        self._exhaustion_logged = False

    @abstractmethod
    def step(self, grid: Grid) -> None:
        """Pop one frontier entry and expand it into ``grid``."""

    @abstractmethod
    def get_path(self, grid: Grid) -> List[Coord]:
        """Return the start-to-end path, or an empty list when unsolved."""

    @abstractmethod
    def is_solved(self) -> bool:
        """Whether the end cell has been reached."""

    @abstractmethod
    def frontier_size(self) -> int:
        """Number of entries still waiting in the frontier."""

    # ------------------------------------------------------------------

    def is_exhausted(self) -> bool:
        """True when the frontier ran dry without reaching the end cell."""

        return not self.is_solved() and self.frontier_size() == 0

    def get_accuracy(self, grid: Grid) -> float:
        """Path length divided by the number of expanded cells."""

        if not self.is_solved():
            return 0.0
        if self.traversed_cells == 0:
            return 1.0
        return len(self.get_path(grid)) / self.traversed_cells

    def new_instance_for(self, grid: Grid) -> "AbstractSearchStrategy":
        return type(self)(grid)

    def solve(self, grid: Grid, max_steps: Optional[int] = None) -> List[Coord]:
        """Step until solved, exhausted or ``max_steps`` calls have been made."""

        steps = 0
        while not self.is_solved() and not self.is_exhausted():
            if max_steps is not None and steps >= max_steps:
                break
            self.step(grid)
            steps += 1
        return self.get_path(grid)

    # ------------------------------------------------------------------

    def _can_step(self) -> bool:
        if self.is_solved():
            return False
        if self.frontier_size() == 0:
            if not self._exhaustion_logged:
                logger.debug("%s frontier exhausted before reaching end %s", type(self).__name__, self.end)
                self._exhaustion_logged = True
            return False
        return True

    def _mark_explored(self, grid: Grid, cell: Coord) -> None:
        self.traversed_cells += 1
        if grid.get(*cell) is not CellState.START:
            grid.set(*cell, CellState.EXPLORED)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start={self.start}, end={self.end}, "
            f"solved={self.is_solved()}, traversed_cells={self.traversed_cells})"
        )


__all__ = ["AbstractSearchStrategy"]
