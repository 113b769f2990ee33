"""Render grid snapshots to images for offline inspection of a search."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image, ImageDraw

from .grid import CellState, Coord, Grid

PathLike = Union[str, Path]

STATE_COLORS = {
    CellState.START: (40, 180, 80),
    CellState.END: (220, 30, 30),
    CellState.WALL: (0, 0, 0),
    CellState.UNEXPLORED: (255, 255, 255),
    CellState.EXPLORED: (150, 150, 150),
    CellState.PATH: (40, 90, 220),
}
LINE_COLOR = (255, 200, 0)

# Row ``state.value`` holds the color for that state.
PALETTE = np.array([STATE_COLORS[state] for state in sorted(CellState, key=lambda s: s.value)], dtype=np.uint8)


class GridRenderer:
    """Paint one square of ``cell_size`` pixels per grid cell."""

    def __init__(self, cell_size: int = 20) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size

    def render(self, grid: Grid, path: Optional[Sequence[Coord]] = None) -> Image.Image:
        pixels = PALETTE[grid.to_array()]
        pixels = np.repeat(np.repeat(pixels, self.cell_size, axis=0), self.cell_size, axis=1)
        image = Image.fromarray(np.ascontiguousarray(pixels))
        if path:
            self._draw_path(ImageDraw.Draw(image), path)
        return image

    def save(self, grid: Grid, output_path: PathLike, path: Optional[Sequence[Coord]] = None) -> Path:
        target = Path(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, path).save(target)
        return target

    def _draw_path(self, draw: ImageDraw.ImageDraw, path: Sequence[Coord]) -> None:
        half = self.cell_size / 2
        points = [(x * self.cell_size + half, y * self.cell_size + half) for x, y in path]
        thickness = max(1, self.cell_size // 4)
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            draw.ellipse((x - thickness, y - thickness, x + thickness, y + thickness), fill=LINE_COLOR)


__all__ = ["GridRenderer", "PALETTE", "STATE_COLORS"]
