"""
Gymnasium environment wrapper for Minesweeper.

Exposes the board to programmatic drivers through a standard
reset/step interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import DETONATED_OBSERVATION
from .play import Move, MoveType, apply_move
from .render import render_board
from .variants import Position, offsets


# ============================================================================
# Minesweeper Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for variant Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = unopened cell
        - -2 = flagged cell
        - -3 = mine shown after a loss
        - 0+ = open cell with neighbor mine count

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height opens cell (i % width, i // width);
        larger actions toggle the flag on cell i - width * height.

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for opening a mine
        - 0 for toggling a flag
        - -0.1 for a move that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._rng = random.Random()
        self.board = Board(self.config, rng=self._rng)

        self._num_cells = self.config.total_cells
        max_count = len(offsets(self.config.variant))

        self.observation_space = spaces.Box(
            low=DETONATED_OBSERVATION,
            high=max_count,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # one open action and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.board = Board(self.config, rng=self._rng)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Open or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action = int(action)
        self._steps += 1

        # off-board actions never reach the board
        if not 0 <= action < self.action_space.n:
            reward = -0.1
        else:
            reward = self._calculate_reward(self._action_to_move(action))

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_move(self, action: int) -> Move:
        """Convert flat action index to an open or flag move."""
        if action < self._num_cells:
            return Move(MoveType.OPEN, self._index_to_position(action))
        return Move(
            MoveType.FLAG, self._index_to_position(action - self._num_cells)
        )

    def _index_to_position(self, index: int) -> Position:
        return index % self.config.width, index // self.config.width

    def _calculate_reward(self, move: Move) -> float:
        """
        Apply a move and score its outcome.

        Args:
            move: Move to apply.

        Returns:
            Reward value.
        """
        if not apply_move(self.board, move):
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        if move.kind == MoveType.FLAG:
            return 0.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "opened": len(self.board.open_positions),
            "flagged": len(self.board.flagged_positions),
            "total_safe": self._num_cells - self.config.num_mines,
            "game_state": self.board.game_state.name,
            "variant": self.config.variant.value,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = the action would change the board.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask
        for x, y in self.board.get_valid_actions():
            mask[y * self.config.width + x] = True
        for x, y in self.board.all_positions:
            if not self.board.is_open((x, y)):
                mask[self._num_cells + y * self.config.width + x] = True
        return mask
