"""Incremental search strategies and the name registry used by the driver."""

from typing import Dict, Type

from ..base import AbstractSearchStrategy
from ..grid import Grid
from .astar import AStar
from .dfs import DepthFirstSearch
from .dijkstra import Dijkstra

__all__ = [
    "ALGORITHMS",
    "AStar",
    "DepthFirstSearch",
    "Dijkstra",
    "create_strategy",
]

ALGORITHMS: Dict[str, Type[AbstractSearchStrategy]] = {
    DepthFirstSearch.name: DepthFirstSearch,
    Dijkstra.name: Dijkstra,
    AStar.name: AStar,
}


def create_strategy(name: str, grid: Grid) -> AbstractSearchStrategy:
    try:
        strategy_cls = ALGORITHMS[name.lower()]
    except KeyError as exc:
        choices = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown algorithm '{name}' (expected one of: {choices})") from exc
    return strategy_cls(grid)
