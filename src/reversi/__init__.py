"""
Reversi rule engine.
This package contains the board, the rules of the game and the game flow.
"""

from .board import BOARD_SIZE, NUM_CELLS, DIRECTIONS, Board, Coord, Direction, Disk, Side
from .errors import (
    ReversiError, OutOfBoundCoord, OutOfBoundIndex, EmptyCell,
    CellAlreadyTaken, IllegalMove, EndedGame, NoUndo,
)
from .turn import Turn
from .game import Game, Move, Undo, Other

__all__ = [
    'BOARD_SIZE', 'NUM_CELLS', 'DIRECTIONS', 'Board', 'Coord', 'Direction', 'Disk', 'Side',
    'ReversiError', 'OutOfBoundCoord', 'OutOfBoundIndex', 'EmptyCell',
    'CellAlreadyTaken', 'IllegalMove', 'EndedGame', 'NoUndo',
    'Turn', 'Game', 'Move', 'Undo', 'Other',
]
