"""
Board module for the sweeper game.

Implements the game-state engine: lazy mine placement, flood-fill
revealing, chording, flagging and win/loss detection.
"""
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Errors
# ============================================================================

class ImpossibleConfigurationError(ValueError):
    """Raised when the mines cannot fit on the board."""


class InvalidCoordinateError(IndexError):
    """Raised when a position lies outside the board."""


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class MoveResult(Enum):
    """Outcome of a reveal or chord request."""

    APPLIED = auto()
    NO_EFFECT = auto()
    FLAG_MISMATCH = auto()


NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Explicit seed for the first game, or None for a random one.
    """

    width: int = 20
    height: int = 20
    num_mines: int = 70
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ImpossibleConfigurationError(
                f"Too many mines for a {self.width}x{self.height} board "
                f"(max {max_mines})"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError("Seed cannot be negative")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


def draw_seed() -> int:
    """Draw a fresh 32-bit seed from OS entropy."""
    return int(np.random.SeedSequence().generate_state(1)[0])


# ============================================================================
# Game Engine
# ============================================================================

@dataclass
class GameEngine:
    """
    Minesweeper game-state engine.

    Cells are stored row-major in a flat list, so the cell at (x, y)
    lives at index ``y * width + x``. Mines are placed on the first
    reveal of each game and never on the revealed cell.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _seed: int = 0
    _state: GameState = GameState.NOT_STARTED
    _mines_placed: bool = False
    _turn: int = 0

    def __post_init__(self) -> None:
        """Set up the first game after dataclass creation."""
        seed = self.config.seed if self.config.seed is not None else draw_seed()
        self._start(seed)

    def _start(self, seed: int) -> None:
        self._cells = [Cell() for _ in range(self.config.total_cells)]
        self._seed = seed
        self._state = GameState.NOT_STARTED
        self._mines_placed = False
        self._turn = 0

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Discard the current game and start a fresh one.

        Args:
            width: New number of columns. Only used if both dimensions
                are positive.
            height: New number of rows.
            seed: Seed for mine placement, drawn at random when None.

        Raises:
            ImpossibleConfigurationError: If the mine count does not fit
                the new dimensions. The current game is left untouched.
        """
        if width is not None and height is not None and width > 0 and height > 0:
            self.config = replace(self.config, width=width, height=height)
        self._start(seed if seed is not None else draw_seed())

    def advance_turn(self) -> int:
        """Count one iteration of the caller's game loop."""
        self._turn += 1
        return self._turn

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self, exclude_x: int, exclude_y: int) -> None:
        """
        Place mines at random, keeping one position mine-free.

        Placement depends only on the seed, the dimensions and the
        excluded position.
        """
        rng = np.random.default_rng(self._seed)
        blocked = self._index(exclude_x, exclude_y)
        placed = 0
        while placed < self.config.num_mines:
            index = int(rng.integers(0, self.config.total_cells))
            if index == blocked or self._cells[index].is_mine:
                continue
            self._add_mine(index)
            placed += 1
        self._mines_placed = True

    def _add_mine(self, index: int) -> None:
        """Turn the cell at index into a mine and bump its neighbors."""
        cell = self._cells[index]
        cell.is_mine = True
        cell.neighbor_mines = 0
        x, y = index % self.config.width, index // self.config.width
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            neighbor = self._cells[self._index(neighbor_x, neighbor_y)]
            if not neighbor.is_mine:
                neighbor.neighbor_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield the in-bounds positions around (x, y)."""
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.is_valid_position(new_x, new_y):
                yield new_x, new_y

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _index(self, x: int, y: int) -> int:
        return y * self.config.width + x

    def _require_position(self, x: int, y: int) -> Cell:
        if not self.is_valid_position(x, y):
            raise InvalidCoordinateError(
                f"({x}, {y}) is outside the "
                f"{self.config.width}x{self.config.height} board"
            )
        return self._cells[self._index(x, y)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, x: int, y: int) -> MoveResult:
        """
        Reveal the cell at (x, y).

        The first reveal of a game places the mines. Revealing an
        already revealed numbered cell is treated as a chord. Revealing
        an empty cell opens its whole empty region and its numbered
        border. Revealing a mine loses the game.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            The outcome of the move.

        Raises:
            InvalidCoordinateError: If (x, y) is off the board.
        """
        cell = self._require_position(x, y)
        if self.game_over:
            return MoveResult.NO_EFFECT

        if not self._mines_placed:
            self._place_mines(x, y)
            self._state = GameState.PLAYING

        if cell.is_revealed:
            if cell.neighbor_mines > 0:
                return self.chord_reveal(x, y)
            return MoveResult.NO_EFFECT

        self._flood_reveal(x, y)
        if cell.is_mine:
            self._state = GameState.LOST
        return MoveResult.APPLIED

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal from (x, y), opening empty regions with a worklist."""
        pending = [(x, y)]
        while pending:
            current_x, current_y = pending.pop()
            cell = self._cells[self._index(current_x, current_y)]
            if not cell.reveal():
                continue
            if cell.is_mine or cell.neighbor_mines > 0:
                continue
            for neighbor_x, neighbor_y in self.neighbors(current_x, current_y):
                if not self._cells[self._index(neighbor_x, neighbor_y)].is_revealed:
                    pending.append((neighbor_x, neighbor_y))

    def chord_reveal(self, x: int, y: int) -> MoveResult:
        """
        Reveal every unflagged safe neighbor of a revealed number.

        Only allowed when the number of flagged neighbors equals the
        cell's neighbor mine count. Mines are skipped whatever their
        flag, so chording never loses the game.

        Returns:
            FLAG_MISMATCH when the flag count is wrong (nothing changes),
            NO_EFFECT when the cell cannot be chorded, APPLIED otherwise.
        """
        cell = self._require_position(x, y)
        if self.game_over or not cell.is_revealed or cell.neighbor_mines == 0:
            return MoveResult.NO_EFFECT

        if self._count_adjacent_flags(x, y) != cell.neighbor_mines:
            return MoveResult.FLAG_MISMATCH

        for neighbor_x, neighbor_y in list(self.neighbors(x, y)):
            neighbor = self._cells[self._index(neighbor_x, neighbor_y)]
            if not neighbor.is_mine and not neighbor.is_flagged:
                self._flood_reveal(neighbor_x, neighbor_y)
        return MoveResult.APPLIED

    def _count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if self._cells[self._index(neighbor_x, neighbor_y)].is_flagged:
                count += 1
        return count

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        cell = self._require_position(x, y)
        if self.game_over:
            return False
        return cell.toggle_flag()

    def check_win(self) -> bool:
        """
        Declare the win once only mines can remain hidden.

        Nothing can be won before the first reveal places the mines.
        The game is won when correctly flagged mines plus hidden,
        unflagged cells add up to the mine count. Every mine is then
        flagged so the final board shows them all.

        Returns:
            True if this call ended the game with a win.
        """
        if self.game_over or not self._mines_placed:
            return False

        correctly_flagged = 0
        unrevealed_unflagged = 0
        for cell in self._cells:
            if cell.is_flagged:
                if cell.is_mine:
                    correctly_flagged += 1
            elif not cell.is_revealed:
                unrevealed_unflagged += 1

        if correctly_flagged + unrevealed_unflagged != self.config.num_mines:
            return False

        for cell in self._cells:
            if cell.is_mine:
                cell.force_flag()
        self._state = GameState.WON
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def seed(self) -> int:
        """Seed used for this game's mine placement."""
        return self._seed

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def game_over(self) -> bool:
        """Check if game has ended either way."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """All cells in row-major order."""
        return tuple(self._cells)

    @property
    def flag_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mine count minus placed flags, as shown to the player."""
        return self.config.num_mines - self.flag_count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(x, y):
            return None
        return self._cells[self._index(x, y)]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for index, cell in enumerate(self._cells):
            obs[index // self.config.width, index % self.config.width] = (
                cell.to_observation()
            )
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of hidden, unflagged cells.

        Returns:
            List of (x, y) positions that can be revealed.
        """
        actions = []
        for index, cell in enumerate(self._cells):
            if cell.state == CellState.HIDDEN:
                actions.append((index % self.config.width, index // self.config.width))
        return actions
