"""
Cell module for Minesweeper game.

Describes what a single square looks like to a renderer or an agent:
one of five visual states plus the mine count of open squares.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellView(Enum):
    """Mutually exclusive visual states of a square."""

    FLAGGED = auto()
    DETONATED_MINE = auto()
    HIDDEN_MINE = auto()
    OPEN = auto()
    UNOPENED = auto()


UNOPENED_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
DETONATED_OBSERVATION = -3


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Snapshot of one square as seen from outside the board.

    Attributes:
        view: Visual state of the square.
        mines_near: Neighbor mine count; only meaningful for OPEN squares.
    """

    view: CellView = CellView.UNOPENED
    mines_near: int = 0

    @property
    def is_open(self) -> bool:
        """Check if square is open."""
        return self.view == CellView.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if square shows a flag."""
        return self.view == CellView.FLAGGED

    @property
    def symbol(self) -> str:
        """
        Two-character text for the square.

        Hidden mines look exactly like unopened squares.
        """
        if self.view == CellView.FLAGGED:
            return "F "
        if self.view == CellView.DETONATED_MINE:
            return "# "
        if self.view == CellView.OPEN:
            if self.mines_near > 0:
                return f"{self.mines_near} "
            return "  "
        return ". "

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Unopened square (including hidden mines)
            -2: Flagged square
            -3: Mine shown after a loss
            0+: Open square with its neighbor mine count
        """
        if self.view == CellView.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.view == CellView.DETONATED_MINE:
            return DETONATED_OBSERVATION
        if self.view == CellView.OPEN:
            return self.mines_near
        return UNOPENED_OBSERVATION
