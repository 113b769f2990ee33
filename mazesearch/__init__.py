"""Maze generation and step-by-step pathfinding toolkit."""

__all__ = [
    "AbstractSearchStrategy",
    "ALGORITHMS",
    "AStar",
    "CellState",
    "DepthFirstSearch",
    "Dijkstra",
    "Grid",
    "GridBoundsError",
    "GridRenderer",
    "MazeGenerator",
    "PathEvaluationResult",
    "PathfindingSession",
    "SessionSummary",
    "create_strategy",
    "evaluate_path",
    "is_connected",
    "shortest_path_length",
]

from .base import AbstractSearchStrategy
from .grid import CellState, Grid, GridBoundsError
from .generator import MazeGenerator
from .search import ALGORITHMS, AStar, DepthFirstSearch, Dijkstra, create_strategy
from .evaluator import PathEvaluationResult, evaluate_path, is_connected, shortest_path_length
from .render import GridRenderer
from .session import PathfindingSession, SessionSummary
