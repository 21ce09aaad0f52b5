"""Snake Graph — Battlesnake server and per-turn board model."""

from snake_graph.board import (
    BoardError,
    BoardState,
    CapacityError,
    Cell,
    CellType,
    OutOfBoundsError,
)
from snake_graph.config import SnakeConfig

__all__ = [
    "BoardError",
    "BoardState",
    "CapacityError",
    "Cell",
    "CellType",
    "OutOfBoundsError",
    "SnakeConfig",
]
