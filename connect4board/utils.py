"""
utils.py - Constants, enumerations and grid helpers for Connect Four

This module holds the fixed board geometry, the player and game-state
enumerations, the win-scan directions, and helpers that operate directly
on the raw numpy grid used by the Board class.
"""

from enum import Enum, auto
from typing import List, Optional

import numpy as np

# Board geometry
NUM_ROWS = 6
NUM_COLS = 7
CONNECT_N = 4  # pieces in a line needed to win

# Grid value for an unoccupied cell
EMPTY = 0


class Player(Enum):
    """The two piece colours."""
    RED = 1
    YELLOW = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        return Player.YELLOW if self is Player.RED else Player.RED

    @property
    def symbol(self) -> str:
        return self.name[0]

    def __str__(self):
        return self.symbol


class GameState(Enum):
    """Where a board stands in the game."""
    IN_PROGRESS = auto()
    RED_WINS = auto()
    YELLOW_WINS = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameState.IN_PROGRESS

    @classmethod
    def won_by(cls, player: Player) -> 'GameState':
        return cls.RED_WINS if player is Player.RED else cls.YELLOW_WINS


class Direction(Enum):
    """Directions a four-in-a-row can run from its starting cell."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right


# (row, col) steps; insertion order is the win-scan order
DIRECTION_VECTORS = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
}

GLYPHS = {EMPTY: " ", Player.RED.value: Player.RED.symbol, Player.YELLOW.value: Player.YELLOW.symbol}


def empty_grid() -> np.ndarray:
    """Return a new all-empty grid."""
    return np.full((NUM_ROWS, NUM_COLS), EMPTY, dtype=np.int8)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is on the board, False otherwise
    """
    return 0 <= row < NUM_ROWS and 0 <= col < NUM_COLS


def is_valid_column(col: int) -> bool:
    return 0 <= col < NUM_COLS


def cell_to_player(value) -> Optional[Player]:
    """Convert a raw grid value to a Player, or None for an empty cell."""
    value = int(value)
    return None if value == EMPTY else Player(value)


def get_column_height(grid: np.ndarray, column: int) -> int:
    """
    Get the number of pieces in a column.

    Relies on gravity: pieces in a column are a contiguous block at the bottom.
    """
    return int(np.count_nonzero(grid[:, column] != EMPTY))


def lowest_empty_row(grid: np.ndarray, column: int) -> Optional[int]:
    """Row a piece dropped into ``column`` would land in, or None if it is full."""
    for row in range(NUM_ROWS - 1, -1, -1):
        if grid[row, column] == EMPTY:
            return row
    return None


def has_floating_pieces(grid: np.ndarray) -> bool:
    """True if any occupied cell sits above an empty one in the same column."""
    occupied = grid != EMPTY
    # a cell is floating when it is occupied and the cell below it is empty
    return bool(np.any(occupied[:-1, :] & ~occupied[1:, :]))


def render_grid_ascii(grid: np.ndarray, prefix: str = "") -> str:
    """
    Render the grid as text, one line per row, top row first.

    Args:
        grid: The raw board grid
        prefix: String prepended to every line

    Returns:
        Lines of the form ``|R| |Y| | | | |`` each ending with a newline
    """
    lines: List[str] = []
    for row in grid:
        lines.append(prefix + "|" + "".join(GLYPHS[int(cell)] + "|" for cell in row) + "\n")
    return "".join(lines)
