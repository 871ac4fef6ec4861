"""
connect4board.game - Board and move types for Connect Four

This package contains the Move value type and the Board entity that
applies moves, lists legal moves and detects a winner.
"""

from connect4board.game.move import Move
from connect4board.game.board import Board, IllegalMoveError

__all__ = ['Board', 'IllegalMoveError', 'Move']
