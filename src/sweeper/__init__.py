"""
Minesweeper game module.

Provides the board engine with pluggable neighbor rules, text rendering,
interactive play and a Gymnasium environment.
"""
from .variants import Variant, Position, offsets, neighbors
from .cell import Cell, CellView
from .board import Board, BoardConfig, GameState
from .render import render_board
from .play import (
    Move,
    MoveType,
    MoveValidationError,
    apply_move,
    read_move,
    play,
)
from .environment import SweeperEnv

__all__ = [
    "Variant",
    "Position",
    "offsets",
    "neighbors",
    "Cell",
    "CellView",
    "Board",
    "BoardConfig",
    "GameState",
    "render_board",
    "Move",
    "MoveType",
    "MoveValidationError",
    "apply_move",
    "read_move",
    "play",
    "SweeperEnv",
]
