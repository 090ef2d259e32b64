"""
Sweeper - a terminal minesweeper built around a small game-state engine.
"""
from .game import (
    BoardConfig,
    Cell,
    CellState,
    GameEngine,
    GameState,
    MoveResult,
)

__version__ = "0.1.0"

__all__ = [
    "BoardConfig",
    "Cell",
    "CellState",
    "GameEngine",
    "GameState",
    "MoveResult",
]
