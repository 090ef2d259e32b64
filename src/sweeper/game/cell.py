"""
Cell module for the sweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
            Only meaningful when the cell is not a mine.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    neighbor_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any flag on it.

        Returns:
            True if the cell changed state, False if already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def force_flag(self) -> None:
        """Mark the cell flagged whatever its current state."""
        self.state = CellState.FLAGGED

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for programmatic players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_mines
