"""
Text rendering for the Minesweeper board.
"""
from .board import Board


def render_board(board: Board) -> str:
    """
    Render board as a bordered fixed-width grid.

    Each square takes two characters. For a 3x2 board:

        +-------+
        | . . F |
        | 1 .   |
        +-------+

    Args:
        board: Board to draw.

    Returns:
        Multi-line string without a trailing newline.
    """
    border = "+" + "-" * (board.width * 2 + 1) + "+"
    lines = [border]
    for y in range(board.height):
        squares = "".join(
            board.get_cell((x, y)).symbol for x in range(board.width)
        )
        lines.append("| " + squares + "|")
    lines.append(border)
    return "\n".join(lines)
