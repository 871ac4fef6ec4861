"""
connect4board - Connect Four board state and rules

This package models a Connect Four board: dropping pieces under gravity,
listing legal moves and detecting four in a row. Choosing moves is left
to callers.
"""

from connect4board.utils import NUM_ROWS, NUM_COLS, CONNECT_N, Player, GameState
from connect4board.game import Board, IllegalMoveError, Move

__version__ = '0.1.0'

__all__ = ['Board', 'CONNECT_N', 'GameState', 'IllegalMoveError', 'Move',
           'NUM_COLS', 'NUM_ROWS', 'Player']
