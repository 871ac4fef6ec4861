"""
board.py - Board representation and rules for Connect Four

This module implements the Board class which owns the grid of pieces,
applies moves under the gravity rule, lists legal moves and detects a
four-in-a-row winner.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from connect4board.debug import debug, DebugLevel
from connect4board.game.move import Move
from connect4board.utils import (NUM_ROWS, NUM_COLS, CONNECT_N, EMPTY, Player, GameState,
                                 DIRECTION_VECTORS, empty_grid, is_valid_position,
                                 is_valid_column, cell_to_player, get_column_height,
                                 lowest_empty_row, has_floating_pieces, render_grid_ascii)

Line = List[Optional[Player]]

# glyphs accepted by Board.from_rows
_ROW_GLYPHS = {".": EMPTY, " ": EMPTY, "R": Player.RED.value, "Y": Player.YELLOW.value}


class IllegalMoveError(ValueError):
    """Raised when a move targets a column that is already full."""

    def __init__(self, move: Move, message: str = None):
        self.move = move
        super().__init__(message or f"Column {move.column} is already full")


class Board:
    """
    A Connect Four grid of NUM_ROWS x NUM_COLS cells.

    Rows are 0-indexed from the top, columns 0-indexed from the left.

    Board() is empty, Board(other) is an independent copy of ``other`` and
    Board(other, move) is a copy with ``move`` applied. The source board is
    never modified.
    """

    __hash__ = None

    def __init__(self, source: 'Board' = None, move: Move = None):
        if source is None:
            self.grid = empty_grid()
        else:
            debug.trace("Copying board", "board")
            self.grid = source.grid.copy()

        if move is not None:
            self.make_move(move)

    def copy(self) -> 'Board':
        """Return an independent copy of this board."""
        return Board(self)

    @classmethod
    def from_rows(cls, rows: Sequence[str], check_gravity: bool = True) -> 'Board':
        """
        Build a board from text rows, top row first.

        Each row has NUM_COLS characters: 'R', 'Y', and '.' or ' ' for empty.
        Pass check_gravity=False to build positions that cannot arise in play.

        Raises:
            ValueError: if the shape is wrong, a glyph is unknown, or (when
                checking gravity) a piece is floating above an empty cell
        """
        if len(rows) != NUM_ROWS:
            raise ValueError(f"Expected {NUM_ROWS} rows, got {len(rows)}")

        grid = empty_grid()
        for r, row in enumerate(rows):
            if len(row) != NUM_COLS:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {NUM_COLS}")
            for c, glyph in enumerate(row.upper()):
                if glyph not in _ROW_GLYPHS:
                    raise ValueError(f"Unknown glyph {glyph!r} at ({r}, {c})")
                grid[r, c] = _ROW_GLYPHS[glyph]

        if check_gravity and has_floating_pieces(grid):
            raise ValueError("Board violates gravity: a piece sits above an empty cell")

        board = cls()
        board.grid = grid
        return board

    def get_player(self, row: int, col: int) -> Optional[Player]:
        """
        Return the player in (row, col), or None for an empty cell.

        Precondition: (row, col) is on the board.
        """
        assert is_valid_position(row, col), f"({row}, {col}) is off the board"
        return cell_to_player(self.grid[row, col])

    def get_tile(self, row: int, col: int) -> Optional[Player]:
        """Unchecked variant of get_player for callers that already hold valid coordinates."""
        return cell_to_player(self.grid[row, col])

    def column_height(self, col: int) -> int:
        return get_column_height(self.grid, col)

    def is_column_full(self, col: int) -> bool:
        return bool(self.grid[0, col] != EMPTY)

    def is_full(self) -> bool:
        return bool(np.all(self.grid[0] != EMPTY))

    def make_move(self, move: Move) -> int:
        """
        Drop a piece of ``move.player`` into ``move.column``.

        Args:
            move: The move to apply

        Returns:
            The row the piece landed in

        Raises:
            IllegalMoveError: if the column is full; the board is left unchanged
        """
        assert is_valid_column(move.column), f"Column {move.column} is off the board"

        if self.is_column_full(move.column):
            debug.debug(f"Rejected {move}: column full", "board")
            raise IllegalMoveError(move)

        row = lowest_empty_row(self.grid, move.column)
        self.grid[row, move.column] = move.player.value
        debug.debug(f"Placed {move.player.name} at ({row}, {move.column})", "board")

        # win scan is diagnostic only, skipped unless DEBUG
        if debug.should_log(DebugLevel.DEBUG, "board"):
            marker = f"win_check:{id(self)}"
            debug.start_timer(marker)
            state = self.game_state()
            if state.is_game_over():
                debug.info(f"Game over after {move}: {state.name}", "board")
            debug.end_timer(marker, "board")

        return row

    def get_possible_moves(self, player: Player) -> List[Move]:
        """
        Return every move ``player`` can make, in increasing column order.

        No move is possible once the board has a winner. Otherwise there is
        one move per column that is not full, so a full board yields [].
        """
        if self.has_connect_four() is not None:
            return []

        return [Move(player, col) for col in range(NUM_COLS) if not self.is_column_full(col)]

    def possible_win(self, row: int, col: int, delta: Tuple[int, int]) -> Optional[Line]:
        """
        Return the occupants of the CONNECT_N cells starting at (row, col)
        and stepping by ``delta``, or None if the line leaves the board.
        """
        d_row, d_col = delta
        end_row = row + (CONNECT_N - 1) * d_row
        end_col = col + (CONNECT_N - 1) * d_col
        if not (is_valid_position(row, col) and is_valid_position(end_row, end_col)):
            return None

        return [self.get_tile(row + i * d_row, col + i * d_col) for i in range(CONNECT_N)]

    def win_locations(self) -> List[Line]:
        """
        Return the contents of every on-board line of CONNECT_N cells.

        Lines are ordered by direction (vertical, horizontal, up-diagonal,
        down-diagonal), then by starting cell in row-major order.
        """
        locations = []
        for delta in DIRECTION_VECTORS.values():
            for row in range(NUM_ROWS):
                for col in range(NUM_COLS):
                    line = self.possible_win(row, col, delta)
                    if line is not None:
                        locations.append(line)
        return locations

    def has_connect_four(self) -> Optional[Player]:
        """Return the player with four in a row, or None if nobody has one."""
        for line in self.win_locations():
            first = line[0]
            if first is not None and all(cell == first for cell in line[1:]):
                return first
        return None

    def game_state(self) -> GameState:
        """Classify the board; a winner takes precedence over a full board."""
        winner = self.has_connect_four()
        if winner is not None:
            return GameState.won_by(winner)
        if self.is_full():
            return GameState.DRAW
        return GameState.IN_PROGRESS

    def get_state(self) -> np.ndarray:
        """Return a copy of the raw grid (0 empty, otherwise Player.value)."""
        return self.grid.copy()

    def render(self, prefix: str = "") -> str:
        """Render the board with ``prefix`` prepended to every line."""
        return render_grid_ascii(self.grid, prefix)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.game_state().name}, pieces={int(np.count_nonzero(self.grid))})"


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    player = Player.RED
    for col in [3, 2, 4, 2, 5, 2, 6]:
        board.make_move(Move(player, col))
        player = player.other()

    print(board.render("  "))
    print(f"Winner: {board.has_connect_four()}")
    print(f"State: {board.game_state().name}")
    print(f"Possible moves: {board.get_possible_moves(player)}")

    # speculative copy leaves the original alone
    branch = Board(Board(), Move(Player.YELLOW, 0))
    print(branch.render("  "))
