"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper.game import BoardConfig, Cell, GameEngine, GameState


def build_engine(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> GameEngine:
    """Create an in-progress engine with mines at the given (x, y) positions."""
    mines = list(mines)
    engine = GameEngine(BoardConfig(width, height, len(mines), seed=0))
    for x, y in mines:
        engine._add_mine(y * width + x)
    engine._mines_placed = True
    engine._state = GameState.PLAYING
    return engine


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def make_engine() -> Callable[..., GameEngine]:
    """Factory for engines with a hand-placed mine layout."""
    return build_engine


@pytest.fixture
def default_engine() -> GameEngine:
    """Create a 9x9 engine with 10 mines and a fixed seed."""
    return GameEngine(BoardConfig(9, 9, 10, seed=1234))


@pytest.fixture
def small_engine() -> GameEngine:
    """Create a small 3x3 engine with 1 mine for testing."""
    return GameEngine(BoardConfig(3, 3, 1, seed=7))


@pytest.fixture
def empty_engine() -> GameEngine:
    """Create an engine with no mines for cascade testing."""
    return GameEngine(BoardConfig(5, 5, 0, seed=0))


@pytest.fixture
def corner_engine() -> GameEngine:
    """
    5x5 engine with mines in two corners.

    Layout (x across, y down), M = mine:

        M 1 0 0 0
        1 1 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 M
    """
    return build_engine(5, 5, [(0, 0), (4, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
