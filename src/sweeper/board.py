"""
Board module for Minesweeper game.

Implements the game board with mine placement, variant-aware mine
counting, cell opening with cascade, flagging, and game state management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Set, Union

import numpy as np

from .cell import Cell, CellView
from .variants import Position, Variant, neighbors


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        variant: Neighbor rule (a Variant or its name).
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    variant: Union[Variant, str] = Variant.NORMAL

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.variant, str):
            self.variant = Variant.from_name(self.variant)
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of squares on the board."""
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the mine, open and flagged position sets. Opening and flagging
    mutate the board in place; winning is checked separately with
    determine_win() after each move.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _mines: Set[Position] = field(default_factory=set, repr=False)
    _open: Set[Position] = field(default_factory=set, repr=False)
    _flagged: Set[Position] = field(default_factory=set, repr=False)
    _all_positions: FrozenSet[Position] = field(
        default_factory=frozenset, repr=False
    )
    _game_state: GameState = GameState.PLAYING

    def __post_init__(self) -> None:
        """Build the position set and place mines unless given."""
        self._all_positions = frozenset(
            (x, y)
            for x in range(self.config.width)
            for y in range(self.config.height)
        )
        if not self._mines:
            self._place_mines()

    @classmethod
    def with_mines(
        cls,
        width: int,
        height: int,
        mines: Iterable[Position],
        variant: Union[Variant, str] = Variant.NORMAL,
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines.
            variant: Neighbor rule.

        Returns:
            New board in the playing state.

        Raises:
            ValueError: If a mine is out of bounds or the layout is invalid.
        """
        mine_set = set(mines)
        config = BoardConfig(width, height, len(mine_set), variant)
        for x, y in mine_set:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(f"Mine out of bounds: ({x}, {y})")
        return cls(config=config, _mines=mine_set)

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self) -> None:
        """Pick distinct mine positions uniformly at random."""
        positions = self._positions_row_major()
        self._mines = set(self.rng.sample(positions, self.config.num_mines))
        logger.debug(
            "Placed %d mines on %dx%d board (%s)",
            len(self._mines),
            self.config.width,
            self.config.height,
            self.config.variant.value,
        )

    def _positions_row_major(self) -> List[Position]:
        """Get all positions in row-major order."""
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
        ]

    # ========================================================================
    # Queries (Low-level)
    # ========================================================================

    def is_valid_position(self, position: Position) -> bool:
        """Check if position is within board bounds."""
        x, y = position
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def is_mine(self, position: Position) -> bool:
        return position in self._mines

    def is_open(self, position: Position) -> bool:
        return position in self._open

    def is_flagged(self, position: Position) -> bool:
        return position in self._flagged

    def neighbors(self, position: Position) -> List[Position]:
        """Neighbors of a cell under the board's variant, duplicates kept."""
        return neighbors(
            self.config.variant,
            position,
            self.config.width,
            self.config.height,
        )

    def mines_near(self, position: Position) -> int:
        """
        Count neighbor entries that are mines.

        A neighbor listed twice by the variant counts twice.
        """
        count = 0
        for neighbor in self.neighbors(position):
            if neighbor in self._mines:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, position: Position) -> bool:
        """
        Open a cell.

        Flagged and already open cells are left alone. Opening a mine
        loses the game without adding the mine to the open set. Opening
        a cell with no neighboring mines opens its neighbors too, spreading
        through every connected zero-count region.

        Args:
            position: (x, y) of the cell to open.

        Returns:
            True if the board or game state changed, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if position in self._open or position in self._flagged:
            return False

        if position in self._mines:
            self._game_state = GameState.LOST
            logger.debug("Mine opened at %s, game lost", position)
            return True

        opened = self._open_cascade(position)
        logger.debug("Opened %d cell(s) from %s", opened, position)
        return True

    def _open_cascade(self, start: Position) -> int:
        """
        Open start and spread through zero-count cells.

        Uses an explicit stack so large empty regions never hit the
        recursion limit. Cells reached from a zero-count cell can never
        be mines.

        Returns:
            Number of cells newly opened.
        """
        opened = 0
        pending = [start]
        while pending:
            position = pending.pop()
            if position in self._open or position in self._flagged:
                continue
            self._open.add(position)
            opened += 1
            if self.mines_near(position) == 0:
                pending.extend(
                    neighbor
                    for neighbor in self.neighbors(position)
                    if neighbor not in self._open
                )
        return opened

    def flag(self, position: Position) -> bool:
        """
        Toggle flag on a cell.

        Open cells cannot be flagged. Flags are annotations only and
        need not match the real mines.

        Args:
            position: (x, y) of the cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if position in self._open:
            return False
        if position in self._flagged:
            self._flagged.remove(position)
        else:
            self._flagged.add(position)
        return True

    def determine_win(self) -> bool:
        """
        Mark the game won if every non-mine cell is open.

        Only evaluated while playing; a lost game stays lost.

        Returns:
            True if the game is won.
        """
        if self._game_state == GameState.PLAYING:
            if self._open | self._mines == self._all_positions:
                self._game_state = GameState.WON
                logger.debug("All safe cells open, game won")
        return self._game_state == GameState.WON

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
    def variant(self) -> Variant:
        return self.config.variant

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def mines(self) -> FrozenSet[Position]:
        return frozenset(self._mines)

    @property
    def open_positions(self) -> FrozenSet[Position]:
        return frozenset(self._open)

    @property
    def flagged_positions(self) -> FrozenSet[Position]:
        return frozenset(self._flagged)

    @property
    def all_positions(self) -> FrozenSet[Position]:
        return self._all_positions

    def get_cell(self, position: Position) -> Cell:
        """
        Get the visual state of a cell.

        Flags are hidden once the game is lost so every mine shows.

        Args:
            position: (x, y) of the cell.

        Returns:
            Cell snapshot for rendering.
        """
        lost = self._game_state == GameState.LOST
        if position in self._flagged and not lost:
            return Cell(CellView.FLAGGED)
        if position in self._mines:
            if lost:
                return Cell(CellView.DETONATED_MINE)
            return Cell(CellView.HIDDEN_MINE)
        if position in self._open:
            return Cell(CellView.OPEN, self.mines_near(position))
        return Cell(CellView.UNOPENED)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D int8 array indexed [y, x] where:
                -1 = unopened
                -2 = flagged
                -3 = mine shown after a loss
                0+ = open with neighbor mine count
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x, y in self._all_positions:
            obs[y, x] = self.get_cell((x, y)).to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be opened.

        Returns:
            Row-major list of (x, y) positions neither open nor flagged.
        """
        return [
            position
            for position in self._positions_row_major()
            if position not in self._open and position not in self._flagged
        ]
