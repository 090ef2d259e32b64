"""
Sweeper game module.

Provides the game-state engine, cell state and the Gymnasium adapter.
"""
from .cell import Cell, CellState
from .board import (
    BoardConfig,
    GameEngine,
    GameState,
    ImpossibleConfigurationError,
    InvalidCoordinateError,
    MoveResult,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "BoardConfig",
    "GameEngine",
    "GameState",
    "ImpossibleConfigurationError",
    "InvalidCoordinateError",
    "MoveResult",
    "MinesweeperEnv",
]
