"""
Exceptions raised by the Reversi engine.
"""


class ReversiError(Exception):
    """Base class for every error raised by the engine."""


class OutOfBoundCoord(ReversiError):
    """A coordinate lies outside the board."""

    def __init__(self, coord):
        super().__init__(f"Coordinate {tuple(coord)} is out of the board")
        self.coord = coord


class OutOfBoundIndex(ReversiError):
    """A cell index lies outside [0, NUM_CELLS)."""

    def __init__(self, index: int):
        super().__init__(f"Cell index {index} is out of the board")
        self.index = index


class EmptyCell(ReversiError):
    """A disk was expected on an empty cell."""

    def __init__(self, coord):
        super().__init__(f"Cell {tuple(coord)} is empty")
        self.coord = coord


class CellAlreadyTaken(ReversiError):
    """A disk was placed on an occupied cell."""

    def __init__(self, coord):
        super().__init__(f"Cell {tuple(coord)} is already taken")
        self.coord = coord


class IllegalMove(ReversiError):
    """The move does not outflank any opposing disk."""

    def __init__(self, coord):
        super().__init__(f"Move at {tuple(coord)} is illegal")
        self.coord = coord


class EndedGame(ReversiError):
    """The turn is over: no further move can be made."""

    def __init__(self, turn=None):
        super().__init__("The game has ended")
        self.turn = turn


class NoUndo(ReversiError):
    """History holds no turn to go back to."""

    def __init__(self):
        super().__init__("No move to undo")
