"""
Gymnasium environment wrapper for Minesweeper.

Exposes a SessionController through the standard RL interface so agents
can play the same rules as a human player.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .events import GameOver
from .session import SessionController


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = exploded mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols opens cell (i // cols, i % cols); the
        second half toggles the flag on the same cells.

    Rewards:
        - +1 for opening safe cells
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for placing or removing a flag
        - -0.1 for an action that changed nothing
    """

    metadata = {"render_modes": []}

    WIN_REWARD = 10.0
    LOSS_REWARD = -10.0
    OPEN_REWARD = 1.0
    FLAG_REWARD = 0.0
    INVALID_REWARD = -0.1

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 8x8 with 10 mines).
        """
        super().__init__()

        self.config = config or GameConfig()
        self.controller = SessionController(self.config)
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(0, 2**31 - 1)))
        self.controller = SessionController(self.config, rng=rng)
        self._steps = 0

        return self.controller.grid.to_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open, or cell index + rows * cols to flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if flag:
            reward = self._flag_reward(row, col)
        else:
            reward = self._open_reward(row, col)

        observation = self.controller.grid.to_observation()
        terminated = self.controller.state.is_over

        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        flag, index = divmod(action, self._num_cells)
        row, col = divmod(index, self.config.cols)
        return bool(flag), row, col

    def _open_reward(self, row: int, col: int) -> float:
        events = self.controller.open(row, col)
        if not events:
            return self.INVALID_REWARD
        for event in events:
            if isinstance(event, GameOver):
                return self.WIN_REWARD if event.won else self.LOSS_REWARD
        return self.OPEN_REWARD

    def _flag_reward(self, row: int, col: int) -> float:
        if not self.controller.toggle_flag(row, col):
            return self.INVALID_REWARD
        return self.FLAG_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        summary = self.controller.get_summary()
        return {
            "steps": self._steps,
            "opened": summary.opened_safe_count,
            "total_safe": summary.total_safe_cells,
            "flags_remaining": summary.flags_remaining,
            "game_state": summary.phase.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        state = self.controller.state
        if state.is_over:
            return mask
        for cell in self.controller.grid.cells():
            index = cell.row * self.config.cols + cell.col
            mask[index] = cell.is_hidden
            mask[self._num_cells + index] = cell.is_flagged or (
                cell.is_hidden and state.flags_remaining > 0
            )
        return mask
