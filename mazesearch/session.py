"""Tick-driven driver tying a generated maze to one search strategy."""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .base import AbstractSearchStrategy
from .generator import MazeGenerator
from .grid import Coord, Grid
from .render import GridRenderer
from .search import ALGORITHMS, create_strategy

logger = logging.getLogger(__name__)


@dataclass
class SessionSummary:
    algorithm: str
    width: int
    height: int
    start: Coord
    end: Coord
    ticks: int
    solved: bool
    exhausted: bool
    traversed_cells: int
    path_length: int
    accuracy: float

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "width": self.width,
            "height": self.height,
            "start": list(self.start),
            "end": list(self.end),
            "ticks": self.ticks,
            "solved": self.solved,
            "exhausted": self.exhausted,
            "traversed_cells": self.traversed_cells,
            "path_length": self.path_length,
            "accuracy": self.accuracy,
        }


class PathfindingSession:
    """Own one grid and one strategy, advancing the search once per tick.

    This is the piece a frame loop calls into: :meth:`tick` once per frame,
    then read :attr:`grid` to draw. Once solved the grid shows the final
    path instead of the exploration trail.
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 30,
        *,
        algorithm: str = "dfs",
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self.grid: Grid = MazeGenerator(width, height, rng=self._rng).generate()
        self.strategy: AbstractSearchStrategy = create_strategy(algorithm, self.grid)
        self.ticks = 0

    @property
    def algorithm(self) -> str:
        return self.strategy.name

    def tick(self) -> bool:
        """Advance the search by one step; returns False once nothing is left to do."""

        if self.strategy.is_solved() or self.strategy.is_exhausted():
            return False
        self.strategy.step(self.grid)
        self.ticks += 1
        if self.strategy.is_solved():
            accuracy = self.strategy.get_accuracy(self.grid)
            logger.info("Solved with %s after %d ticks, accuracy %.2f", self.algorithm, self.ticks, accuracy)
            self.grid.trace_path(self.strategy.get_path(self.grid))
        return True

    def run(
        self,
        max_ticks: Optional[int] = None,
        on_tick: Optional[Callable[["PathfindingSession"], None]] = None,
    ) -> int:
        performed = 0
        while max_ticks is None or performed < max_ticks:
            if not self.tick():
                break
            performed += 1
            if on_tick is not None:
                on_tick(self)
        return performed

    def switch_algorithm(self, name: str) -> None:
        """Replace the strategy with a fresh ``name`` search on the same maze."""

        strategy = create_strategy(name, self.grid)
        self.grid.reset_explored()
        self.strategy = strategy
        self.ticks = 0
        logger.info("Switched to %s", self.algorithm)

    def regenerate(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        width = width if width is not None else self.grid.width
        height = height if height is not None else self.grid.height
        self.grid = MazeGenerator(width, height, rng=self._rng).generate()
        self.strategy = self.strategy.new_instance_for(self.grid)
        self.ticks = 0
        logger.info("Regenerated %dx%d maze", width, height)

    def reset(self) -> None:
        self.grid.reset_explored()
        self.strategy = self.strategy.new_instance_for(self.grid)
        self.ticks = 0

    def summary(self) -> SessionSummary:
        return SessionSummary(
            algorithm=self.algorithm,
            width=self.grid.width,
            height=self.grid.height,
            start=self.grid.start,
            end=self.grid.end,
            ticks=self.ticks,
            solved=self.strategy.is_solved(),
            exhausted=self.strategy.is_exhausted(),
            traversed_cells=self.strategy.traversed_cells,
            path_length=len(self.strategy.get_path(self.grid)),
            accuracy=self.strategy.get_accuracy(self.grid),
        )


__all__ = ["PathfindingSession", "SessionSummary"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and watch a search solve it")
    parser.add_argument("--width", type=int, default=30)
    parser.add_argument("--height", type=int, default=30)
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="dfs")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--max-ticks", type=int, default=None, help="Stop after this many steps even if unsolved")
    parser.add_argument("--output", type=Path, default=None, help="Write the final grid to this image file")
    parser.add_argument("--frames-dir", type=Path, default=None, help="Write intermediate grid images here")
    parser.add_argument("--frame-every", type=int, default=10, help="Ticks between saved frames")
    parser.add_argument("--cell-size", type=int, default=20)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = PathfindingSession(args.width, args.height, algorithm=args.algorithm, seed=args.seed)
    on_tick = None
    if args.output is not None or args.frames_dir is not None:
        renderer = GridRenderer(cell_size=args.cell_size)
        if args.frames_dir is not None:
            frame_every = max(1, args.frame_every)

            def on_tick(current: PathfindingSession) -> None:
                if current.ticks % frame_every == 0 or current.strategy.is_solved():
                    renderer.save(current.grid, args.frames_dir / f"frame_{current.ticks:06d}.png")

    session.run(max_ticks=args.max_ticks, on_tick=on_tick)
    if args.output is not None:
        renderer.save(session.grid, args.output, path=session.strategy.get_path(session.grid))
    print(json.dumps(session.summary().to_dict(), indent=2))


if __name__ == "__main__":
    main()
