"""Cell storage for generated mazes."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

Coord = Tuple[int, int]

# Down, up, right, left. Every expansion in the package uses this order.
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


class GridBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Position {x},{y} is outside a {width}x{height} grid")
        self.x = x
        self.y = y


class CellState(Enum):
    START = 0
    END = 1
    WALL = 2
    UNEXPLORED = 3
    EXPLORED = 4
    PATH = 5

    @property
    def char(self) -> str:
        return _STATE_TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> "CellState":
        try:
            return _CHAR_TO_STATE[char]
        except KeyError as exc:
            raise ValueError(f"Unknown maze character {char!r}") from exc


_STATE_TO_CHAR: Dict[CellState, str] = {
    CellState.START: "S",
    CellState.END: "E",
    CellState.WALL: "#",
    CellState.UNEXPLORED: ".",
    CellState.EXPLORED: "o",
    CellState.PATH: "*",
}
_CHAR_TO_STATE: Dict[str, CellState] = {char: state for state, char in _STATE_TO_CHAR.items()}


class Grid:
    """Row-major maze cells with start and end coordinates.

    Cells are addressed as ``(x, y)`` with ``x`` the column and ``y`` the row.
    Both :meth:`get` and :meth:`set` reject a coordinate when either axis is
    out of range.
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Coord,
        end: Coord,
        cells: Optional[Sequence[CellState]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        for label, point in (("start", start), ("end", end)):
            if not self.in_bounds(*point):
                raise ValueError(f"{label} {point} is outside a {width}x{height} grid")
        self.start: Coord = (int(start[0]), int(start[1]))
        self.end: Coord = (int(end[0]), int(end[1]))

        if cells is None:
            self._cells: List[CellState] = [CellState.UNEXPLORED] * (width * height)
            self._cells[self._index(*self.end)] = CellState.END
            self._cells[self._index(*self.start)] = CellState.START
        else:
            if len(cells) != width * height:
                raise ValueError(f"Expected {width * height} cells, got {len(cells)}")
            self._cells = list(cells)

    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        """Build a grid from a character map (``S``, ``E``, ``#``, ``.``, ``o``, ``*``)."""

        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if not rows:
            raise ValueError("Maze text is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All maze rows must have the same length")

        cells: List[CellState] = []
        start: Optional[Coord] = None
        end: Optional[Coord] = None
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                state = CellState.from_char(char)
                if state is CellState.START:
                    if start is not None:
                        raise ValueError("Maze must have exactly one start (S)")
                    start = (x, y)
                elif state is CellState.END:
                    if end is not None:
                        raise ValueError("Maze must have exactly one end (E)")
                    end = (x, y)
                cells.append(state)

        if start is None:
            raise ValueError("Maze must have a start position (S)")
        # A single-cell maze only carries the start marker.
        if end is None:
            if width * len(rows) != 1:
                raise ValueError("Maze must have an end position (E)")
            end = start
        return cls(width, len(rows), start, end, cells)

    def to_text(self) -> str:
        return "\n".join(
            "".join(self._cells[y * self.width + x].char for x in range(self.width))
            for y in range(self.height)
        )

    def to_array(self) -> np.ndarray:
        """Return the cell states as an integer array of shape ``(height, width)``."""

        codes = np.fromiter((cell.value for cell in self._cells), dtype=np.uint8, count=len(self._cells))
        return codes.reshape(self.height, self.width)

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, self.start, self.end, self._cells)

    # ------------------------------------------------------------------

    @property
    def cells(self) -> Tuple[CellState, ...]:
        return tuple(self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self.width, self.height)
        return y * self.width + x

    def get(self, x: int, y: int) -> CellState:
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, state: CellState) -> None:
        self._cells[self._index(x, y)] = state

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) is CellState.WALL

    def open_neighbors(self, x: int, y: int) -> List[Coord]:
        """In-bounds, non-wall 4-neighbors of ``(x, y)`` in expansion order."""

        neighbors: List[Coord] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny) and not self.is_wall(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def count(self, state: CellState) -> int:
        return sum(1 for cell in self._cells if cell is state)

    # ------------------------------------------------------------------

    def reset_explored(self) -> None:
        """Relabel explored and path cells as unexplored."""

        self._cells = [
            CellState.UNEXPLORED if cell in (CellState.EXPLORED, CellState.PATH) else cell
            for cell in self._cells
        ]

    def trace_path(self, path: Iterable[Coord]) -> None:
        """Replace the exploration trail with ``path``, keeping the endpoints stamped."""

        self._cells = [
            CellState.UNEXPLORED if cell is CellState.EXPLORED else cell for cell in self._cells
        ]
        for x, y in path:
            if self.get(x, y) not in (CellState.START, CellState.END):
                self.set(x, y, CellState.PATH)
        self.set(*self.end, CellState.END)
        self.set(*self.start, CellState.START)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, start={self.start}, end={self.end})"


__all__ = ["CellState", "Coord", "DIRECTIONS", "Grid", "GridBoundsError"]
