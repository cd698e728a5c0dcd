"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Variant


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(BoardConfig(), rng=random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.with_mines(5, 5, [])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 2x2 board with a single mine at (0, 0)."""
    return Board.with_mines(2, 2, [(0, 0)])


@pytest.fixture
def center_mine_orthogonal_board() -> Board:
    """Create a 3x3 orthogonal board with its only mine in the middle."""
    return Board.with_mines(3, 3, [(1, 1)], Variant.ORTHOGONAL)


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x3 normal board with a mine column at x=2.

        . . # . .
        . . # . .
        . . # . .
    """
    return Board.with_mines(5, 3, [(2, 0), (2, 1), (2, 2)])


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Input Fixtures
# ============================================================================

class ScriptedInput:
    """Feeds prepared lines to code expecting input(); EOF when exhausted."""

    def __init__(self, lines) -> None:
        self.lines = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    """Factory for scripted input functions."""
    return ScriptedInput


@pytest.fixture
def output_lines():
    """Collects lines written by the code under test."""
    return []
