"""
move.py - The Move value type

A Move pairs a player with the column they drop a piece into. Column range
is checked when the move is applied to a Board, not here.
"""

from dataclasses import dataclass

from connect4board.utils import Player


@dataclass(frozen=True)
class Move:
    player: Player
    column: int

    def __str__(self) -> str:
        return f"{self.player.name} -> column {self.column}"
