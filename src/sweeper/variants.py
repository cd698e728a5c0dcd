"""
Adjacency variants for the Minesweeper board.

A variant decides which relative offsets count as a cell's neighbors,
both for mine counting and for the open cascade.
"""
from enum import Enum
from typing import Dict, List, Tuple


Position = Tuple[int, int]
Offset = Tuple[int, int]


# ============================================================================
# Variant Tags
# ============================================================================

class Variant(Enum):
    """The fixed set of neighbor rules, keyed by their command-line name."""

    NORMAL = "normal"
    FAR_NORMAL = "far-normal"
    KNIGHT_PATHS = "knight-paths"
    BLIND_UP = "blind-up"
    BLIND_DOWN = "blind-down"
    BLIND_LEFT = "blind-left"
    BLIND_RIGHT = "blind-right"
    ORTHOGONAL = "orthogonal"
    FAR_ORTHOGONAL = "far-orthogonal"
    DIAGONAL = "diagonal"
    FAR_DIAGONAL = "far-diagonal"
    DOUBLED = "doubled"

    @classmethod
    def names(cls) -> List[str]:
        """All variant names in declaration order."""
        return [variant.value for variant in cls]

    @classmethod
    def from_name(cls, name: str) -> "Variant":
        """
        Look up a variant by name.

        Args:
            name: Variant name, case-insensitive (e.g. "far-normal").

        Returns:
            The matching variant.

        Raises:
            ValueError: If the name is not a known variant.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            allowed = ", ".join(cls.names())
            raise ValueError(
                f"Invalid variant {name!r} (allowed: {allowed})"
            ) from None


# ============================================================================
# Offset Tables
# ============================================================================

# y grows downward: "up" is (0, -1)
_ORTHOGONAL: List[Offset] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
_DIAGONAL: List[Offset] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
_NORMAL: List[Offset] = _ORTHOGONAL + _DIAGONAL


def _without(offsets: List[Offset], excluded: Offset) -> List[Offset]:
    return [offset for offset in offsets if offset != excluded]


def _scaled(offsets: List[Offset], factor: int) -> List[Offset]:
    return [(dx * factor, dy * factor) for dx, dy in offsets]


_OFFSETS: Dict[Variant, List[Offset]] = {
    Variant.NORMAL: _NORMAL,
    Variant.FAR_NORMAL: [
        (dx, dy)
        for dx in range(-2, 3)
        for dy in range(-2, 3)
        if (dx, dy) != (0, 0)
    ],
    Variant.KNIGHT_PATHS: [
        (-1, -2), (-1, 2), (1, -2), (1, 2),
        (-2, -1), (-2, 1), (2, -1), (2, 1),
    ],
    Variant.BLIND_UP: _without(_NORMAL, (0, -1)),
    Variant.BLIND_DOWN: _without(_NORMAL, (0, 1)),
    Variant.BLIND_LEFT: _without(_NORMAL, (-1, 0)),
    Variant.BLIND_RIGHT: _without(_NORMAL, (1, 0)),
    Variant.ORTHOGONAL: _ORTHOGONAL,
    Variant.FAR_ORTHOGONAL: _scaled(_ORTHOGONAL, 2) + _ORTHOGONAL,
    Variant.DIAGONAL: _DIAGONAL,
    Variant.FAR_DIAGONAL: _scaled(_DIAGONAL, 2) + _DIAGONAL,
    # orthogonal neighbors are listed twice so they count double
    Variant.DOUBLED: _ORTHOGONAL + _ORTHOGONAL + _DIAGONAL,
}


# ============================================================================
# Geometry
# ============================================================================

def offsets(variant: Variant) -> List[Offset]:
    """
    Get the neighbor offsets for a variant.

    The list may repeat an offset; each entry counts once toward
    a cell's mine count.

    Args:
        variant: Adjacency variant.

    Returns:
        New list of (dx, dy) offsets in table order.
    """
    return list(_OFFSETS[variant])


def neighbors(
    variant: Variant, position: Position, width: int, height: int
) -> List[Position]:
    """
    Get the in-bounds neighbors of a cell.

    Offsets landing outside the board are dropped (no wraparound).
    Duplicates are kept.

    Args:
        variant: Adjacency variant.
        position: (x, y) of the center cell.
        width: Board width.
        height: Board height.

    Returns:
        List of (x, y) neighbor positions.
    """
    x, y = position
    result = []
    for dx, dy in _OFFSETS[variant]:
        new_x = x + dx
        new_y = y + dy
        if 0 <= new_x < width and 0 <= new_y < height:
            result.append((new_x, new_y))
    return result
