"""
Interactive play over a text stream.

Collects validated moves from a player, applies them to a board and
redraws it until the game ends or the player quits. Quitting is returned
to the caller as a move, never as a process exit.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from .board import Board, GameState
from .render import render_board
from .variants import Position


InputFn = Callable[[], str]
OutputFn = Callable[[str], None]

QUIT_WORDS = ("q", "quit")


# ============================================================================
# Move Types
# ============================================================================

class MoveType(Enum):
    """Kinds of move a player can request."""

    OPEN = auto()
    FLAG = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Move:
    """
    A validated move request.

    Attributes:
        kind: What to do.
        position: In-bounds (x, y) target; None for QUIT.
    """

    kind: MoveType
    position: Optional[Position] = None


QUIT = Move(MoveType.QUIT)


class MoveValidationError(ValueError):
    """Raised when player input does not describe a valid move."""


# ============================================================================
# Parsing
# ============================================================================

def is_quit(raw: str) -> bool:
    return raw.strip().lower() in QUIT_WORDS


def parse_coordinate(raw: str, bound: int) -> int:
    """
    Parse a 1-based coordinate.

    Args:
        raw: Player text, e.g. "3".
        bound: Largest accepted value (board width or height).

    Returns:
        0-based index.

    Raises:
        MoveValidationError: If the text is not an integer in 1..bound.
    """
    try:
        value = int(raw.strip())
    except ValueError:
        raise MoveValidationError(f"Not a number: {raw!r}") from None
    if not 1 <= value <= bound:
        raise MoveValidationError(f"Out of range 1-{bound}: {value}")
    return value - 1


def parse_move_type(raw: str) -> MoveType:
    """Parse "open"/"flag"/"quit" or their first letter."""
    text = raw.strip().lower()
    if text in ("o", "open"):
        return MoveType.OPEN
    if text in ("f", "flag"):
        return MoveType.FLAG
    if text in QUIT_WORDS:
        return MoveType.QUIT
    raise MoveValidationError(f"Unknown move type: {raw!r}")


# ============================================================================
# Prompting
# ============================================================================

class _EndOfInput(Exception):
    pass


def _get_input(message: str, input_fn: InputFn, output_fn: OutputFn) -> str:
    """Prompt until the player types something non-blank."""
    while True:
        output_fn(message)
        try:
            text = input_fn()
        except EOFError:
            raise _EndOfInput() from None
        if text.strip():
            return text.strip()


def _read_position(
    board: Board, input_fn: InputFn, output_fn: OutputFn
) -> Optional[Position]:
    """Ask for x then y; None means the player quit."""
    while True:
        raw_x = _get_input(
            f"Enter move x (1-{board.width}): ", input_fn, output_fn
        )
        if is_quit(raw_x):
            return None
        raw_y = _get_input(
            f"Enter move y (1-{board.height}): ", input_fn, output_fn
        )
        if is_quit(raw_y):
            return None
        try:
            return (
                parse_coordinate(raw_x, board.width),
                parse_coordinate(raw_y, board.height),
            )
        except MoveValidationError:
            output_fn("Invalid move.")


def _read_move_type(input_fn: InputFn, output_fn: OutputFn) -> MoveType:
    while True:
        raw = _get_input(
            "Enter move type (open/flag/quit): ", input_fn, output_fn
        )
        try:
            return parse_move_type(raw)
        except MoveValidationError:
            output_fn("Invalid move type.")


def read_move(
    board: Board,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Move:
    """
    Ask the player for a move.

    Re-prompts on blank or invalid input. Typing "q"/"quit" at any
    prompt, or closing the input stream, yields a QUIT move.

    Args:
        board: Board the move is for (supplies coordinate bounds).
        input_fn: Reads one line of player text.
        output_fn: Shows one line to the player.

    Returns:
        A move whose position, if any, is inside the board.
    """
    try:
        position = _read_position(board, input_fn, output_fn)
        if position is None:
            return QUIT
        kind = _read_move_type(input_fn, output_fn)
    except _EndOfInput:
        return QUIT
    if kind == MoveType.QUIT:
        return QUIT
    return Move(kind, position)


# ============================================================================
# Game Loop
# ============================================================================

def apply_move(board: Board, move: Move) -> bool:
    """
    Apply an open or flag move, then check for a win.

    Returns:
        True if the move changed the board or game state.
    """
    if move.kind == MoveType.OPEN:
        changed = board.open(move.position)
    elif move.kind == MoveType.FLAG:
        changed = board.flag(move.position)
    else:
        raise ValueError(f"Cannot apply {move.kind.name} move to a board")
    board.determine_win()
    return changed


def play(
    board: Board,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> GameState:
    """
    Run a game until it is won, lost or the player quits.

    Args:
        board: Fresh board to play on.
        input_fn: Reads one line of player text.
        output_fn: Shows text to the player.

    Returns:
        Final game state (PLAYING if the player quit).
    """
    output_fn(render_board(board))
    while board.is_playing:
        move = read_move(board, input_fn, output_fn)
        if move.kind == MoveType.QUIT:
            output_fn("Quitting...")
            break
        apply_move(board, move)
        if board.is_lost:
            output_fn("You lost!")
        output_fn(render_board(board))
        if board.is_won:
            output_fn("You won!")
    return board.game_state
