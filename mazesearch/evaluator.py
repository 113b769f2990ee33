"""Checks for search results against a breadth-first reference."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

from .grid import Coord, Grid


@dataclass
class PathEvaluationResult:
    starts_at_start: bool
    ends_at_goal: bool
    contiguous: bool
    stray_in_walls: bool
    moves: int
    shortest_moves: Optional[int]
    message: str

    @property
    def is_valid(self) -> bool:
        return self.starts_at_start and self.ends_at_goal and self.contiguous and not self.stray_in_walls

    @property
    def is_optimal(self) -> bool:
        return self.is_valid and self.moves == self.shortest_moves

    def to_dict(self) -> dict:
        return {
            "starts_at_start": self.starts_at_start,
            "ends_at_goal": self.ends_at_goal,
            "contiguous": self.contiguous,
            "stray_in_walls": self.stray_in_walls,
            "moves": self.moves,
            "shortest_moves": self.shortest_moves,
            "is_valid": self.is_valid,
            "is_optimal": self.is_optimal,
            "message": self.message,
        }


def _bfs_distances(grid: Grid) -> Dict[Coord, int]:
    distances = {grid.start: 0}
    queue: deque[Coord] = deque([grid.start])
    while queue:
        cell = queue.popleft()
        for neighbor in grid.open_neighbors(*cell):
            if neighbor not in distances:
                distances[neighbor] = distances[cell] + 1
                queue.append(neighbor)
    return distances


def shortest_path_length(grid: Grid) -> Optional[int]:
    """Number of moves on a shortest start-to-end route, or ``None`` if there is none."""

    return _bfs_distances(grid).get(grid.end)


def is_connected(grid: Grid) -> bool:
    """Whether every non-wall cell can be reached from the start cell."""

    reachable = _bfs_distances(grid)
    open_cells: Set[Coord] = {
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if not grid.is_wall(x, y)
    }
    return open_cells == set(reachable)


def evaluate_path(grid: Grid, path: Sequence[Coord]) -> PathEvaluationResult:
    cells: List[Coord] = [(int(x), int(y)) for x, y in path]
    shortest = shortest_path_length(grid)
    if not cells:
        return PathEvaluationResult(
            starts_at_start=False,
            ends_at_goal=False,
            contiguous=False,
            stray_in_walls=False,
            moves=0,
            shortest_moves=shortest,
            message="No path found.",
        )

    stray_in_walls = any(not grid.in_bounds(x, y) or grid.is_wall(x, y) for x, y in cells)
    contiguous = all(
        abs(ax - bx) + abs(ay - by) == 1 for (ax, ay), (bx, by) in zip(cells, cells[1:])
    )
    starts_at_start = cells[0] == grid.start
    ends_at_goal = cells[-1] == grid.end

    if stray_in_walls:
        message = "Path crosses a wall or leaves the grid."
    elif not starts_at_start:
        message = "Path does not begin at the start cell."
    elif not ends_at_goal:
        message = "Path does not reach the end cell."
    elif not contiguous:
        message = "Path is not continuous from start to end."
    elif len(cells) - 1 == shortest:
        message = "Path is a shortest route from start to end."
    else:
        message = "Path connects start to end."

    return PathEvaluationResult(
        starts_at_start=starts_at_start,
        ends_at_goal=ends_at_goal,
        contiguous=contiguous,
        stray_in_walls=stray_in_walls,
        moves=len(cells) - 1,
        shortest_moves=shortest,
        message=message,
    )


__all__ = ["PathEvaluationResult", "evaluate_path", "is_connected", "shortest_path_length"]
