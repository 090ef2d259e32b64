"""
Unit tests for the Gymnasium environment adapter.
"""
import numpy as np
import pytest
from sweeper.game import BoardConfig, MinesweeperEnv


MINES = [(0, 0), (1, 0), (0, 1), (4, 4), (5, 4)]


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv(BoardConfig(6, 5, 5), render_mode="ansi")


@pytest.fixture
def placed_env(env: MinesweeperEnv, make_engine) -> MinesweeperEnv:
    """
    6x5 environment with a known layout (x across, y down):

        M M 1 0 0 0
        M 3 1 0 0 0
        1 1 0 0 0 0
        0 0 0 1 2 2
        0 0 0 1 M M
    """
    env.reset(seed=0)
    env.engine = make_engine(6, 5, MINES)
    return env


class TestReset:
    """Test episode start."""

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset(seed=3)
        assert obs.shape == (5, 6)
        assert np.all(obs == -1)
        assert info["game_state"] == "NOT_STARTED"
        assert info["hidden"] == 30

    def test_seeded_reset_replays_layout(self, env: MinesweeperEnv) -> None:
        env.reset(seed=11)
        env.step(0)
        first = [cell.is_mine for cell in env.engine.cells]
        seed = env.engine.seed

        env.reset(seed=11)
        env.step(0)
        assert env.engine.seed == seed
        assert [cell.is_mine for cell in env.engine.cells] == first

    def test_spaces_match_config(self, env: MinesweeperEnv) -> None:
        assert env.action_space.n == 30
        assert env.observation_space.shape == (5, 6)


class TestStep:
    """Test rewards and termination."""

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        env.reset(seed=0)
        _, reward, _, truncated, info = env.step(7)
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["revealed"] >= 1
        assert env.engine.get_cell(1, 1).is_revealed is True

    def test_safe_reveal_scores_one(self, placed_env: MinesweeperEnv) -> None:
        obs, reward, terminated, _, info = placed_env.step(2)
        assert reward == 1.0
        assert terminated is False
        assert obs[0, 2] == 1
        assert info["revealed"] == 1

    def test_repeated_action_is_penalized(self, placed_env: MinesweeperEnv) -> None:
        placed_env.step(2)
        _, reward, terminated, _, _ = placed_env.step(2)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_hitting_a_mine_terminates(self, placed_env: MinesweeperEnv) -> None:
        placed_env.step(2)
        _, reward, terminated, _, info = placed_env.step(0)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_moves_after_the_end_are_invalid(
        self, placed_env: MinesweeperEnv
    ) -> None:
        placed_env.step(0)
        _, reward, _, _, _ = placed_env.step(20)
        assert reward == pytest.approx(-0.1)
        assert placed_env.engine.get_cell(2, 3).is_hidden is True

    def test_clearing_the_board_wins(self) -> None:
        env = MinesweeperEnv(BoardConfig(3, 3, 0))
        env.reset(seed=1)
        obs, reward, terminated, _, info = env.step(4)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert np.all(obs == 0)

    def test_step_advances_turn(self, placed_env: MinesweeperEnv) -> None:
        _, _, _, _, info = placed_env.step(2)
        assert info["turn"] == 1


class TestRenderAndMask:
    """Test rendering and action masks."""

    def test_action_mask_tracks_hidden_cells(
        self, placed_env: MinesweeperEnv
    ) -> None:
        assert placed_env.get_action_mask().all()
        placed_env.engine.toggle_flag(5, 0)
        placed_env.step(2)
        mask = placed_env.get_action_mask()
        assert not mask[2]
        assert not mask[5]
        assert mask.sum() == 28

    def test_ansi_render(self, placed_env: MinesweeperEnv) -> None:
        placed_env.engine.toggle_flag(0, 0)
        placed_env.step(2)
        lines = placed_env.render().split("\n")
        assert len(lines) == 5
        assert lines[0] == "F.1..."
        assert lines[4] == "......"

    def test_ansi_render_after_loss(self, placed_env: MinesweeperEnv) -> None:
        placed_env.step(4 * 6 + 4)
        assert placed_env.render().split("\n")[4] == "....*."
