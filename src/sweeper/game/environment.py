"""
Gymnasium environment wrapper for the sweeper engine.

Lets programmatic players drive the same engine the console session
uses: one reveal per step, with the engine's observation codes as the
observation.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, GameEngine, GameState


# ============================================================================
# Constants
# ============================================================================

INVALID_MOVE_REWARD = -0.1
SAFE_REVEAL_REWARD = 1.0

END_REWARDS = {
    GameState.WON: 10.0,
    GameState.LOST: -10.0,
}

# Observation code -> character; counts 1-8 render as their digit.
GLYPHS = {-1: ".", -2: "F", 9: "*", 0: " "}


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment over a :class:`GameEngine`.

    Observation:
        int8 array of shape (height, width) holding
        ``Cell.to_observation()`` codes (-2 to 9).

    Actions:
        ``Discrete(width * height)``; action i reveals x = i % width,
        y = i // width. Hidden cells are the only valid targets.

    Each step counts as one turn and is followed by a win check, the
    same order the console loop uses.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.engine = GameEngine(config or BoardConfig(9, 9, 10))
        self.render_mode = render_mode

        shape = (self.engine.height, self.engine.width)
        self.observation_space = spaces.Box(-2, 9, shape=shape, dtype=np.int8)
        self.action_space = spaces.Discrete(self.engine.width * self.engine.height)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        The board seed is drawn from ``np_random``, so a seeded reset
        replays the same mine layout for the same first move.
        """
        super().reset(seed=seed)
        self.engine.new_game(seed=int(self.np_random.integers(0, 2**32)))
        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """Reveal the cell behind ``action`` and score the outcome."""
        self.engine.advance_turn()
        reward = self._play(int(action))
        return (
            self.engine.get_observation(),
            reward,
            self.engine.game_over,
            False,
            self._get_info(),
        )

    def _play(self, action: int) -> float:
        y, x = divmod(action, self.engine.width)
        cell = self.engine.get_cell(x, y)
        if self.engine.game_over or cell is None or not cell.is_hidden:
            return INVALID_MOVE_REWARD

        self.engine.reveal_cell(x, y)
        self.engine.check_win()
        return END_REWARDS.get(self.engine.state, SAFE_REVEAL_REWARD)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "game_state": self.engine.state.name,
            "turn": self.engine.turn,
            "seed": self.engine.seed,
            "revealed": sum(cell.is_revealed for cell in self.engine.cells),
            "hidden": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Return ("ansi") or print ("human") one character per cell."""
        rows = [
            "".join(GLYPHS.get(code, str(code)) for code in row.tolist())
            for row in self.engine.get_observation()
        ]
        text = "\n".join(rows)
        if self.render_mode == "human":
            print(text)
            return None
        if self.render_mode == "ansi":
            return text
        return None

    def get_action_mask(self) -> np.ndarray:
        """Boolean mask over actions, True where the cell is hidden."""
        return (self.engine.get_observation() == -1).ravel()
