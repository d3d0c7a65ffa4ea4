"""
Turn module for Reversi.
Implements the rules of the game: move legality, disk flipping,
forced passes and end of game detection.
"""
import logging
from typing import List, Optional, Tuple
import numpy as np

from .board import BOARD_SIZE, DIRECTIONS, NUM_CELLS, Board, Coord, Direction, Disk, Side
from .errors import CellAlreadyTaken, EmptyCell, EndedGame, IllegalMove

logger = logging.getLogger(__name__)

# Side to move, or None once the game has ended
State = Optional[Side]


class Turn:
    """
    A position on the board together with the side that has to move next.
    Scores are kept alongside the board for convenience.

    Turns are values: make_move returns a new Turn and never modifies
    the one it is called on.
    """

    def __init__(self, board: Board, state: State, score_dark: int, score_light: int):
        self._board = board
        self._state = state
        self._score_dark = score_dark
        self._score_light = score_light

    @classmethod
    def first_turn(cls) -> 'Turn':
        """Starting position: four disks in the center and Dark to move."""
        board = Board()
        mid = BOARD_SIZE // 2
        board.place_disk(Side.DARK, Coord(mid - 1, mid))
        board.place_disk(Side.DARK, Coord(mid, mid - 1))
        board.place_disk(Side.LIGHT, Coord(mid - 1, mid - 1))
        board.place_disk(Side.LIGHT, Coord(mid, mid))
        return cls(board, Side.DARK, 2, 2)

    @classmethod
    def from_board(cls, board: Board, state: State) -> 'Turn':
        """
        Build a turn from an arbitrary position.

        Args:
            board: The position. It is copied, the caller keeps its own board.
            state: Side to move, or None for an ended game

        Returns:
            Turn with scores counted from the board

        Raises:
            ValueError: if the side to move has no legal move
        """
        board = board.copy()
        turn = cls(board, state, board.count(Side.DARK), board.count(Side.LIGHT))
        if state is not None and not turn.can_move(state):
            raise ValueError(f"{state.name} has no legal move in this position")
        return turn

    @property
    def board(self) -> Board:
        """Copy of the turn's board."""
        return self._board.copy()

    def cells(self) -> np.ndarray:
        """Read-only copy of the board's grid."""
        return self._board.cells()

    def get_cell(self, coord) -> Optional[Disk]:
        return self._board.get_cell(coord)

    @property
    def state(self) -> State:
        return self._state

    @property
    def is_ended(self) -> bool:
        return self._state is None

    @property
    def score_dark(self) -> int:
        return self._score_dark

    @property
    def score_light(self) -> int:
        return self._score_light

    @property
    def score(self) -> Tuple[int, int]:
        """Current score as (dark, light)."""
        return (self._score_dark, self._score_light)

    @property
    def score_diff(self) -> int:
        """Light's score minus Dark's score."""
        return self._score_light - self._score_dark

    @property
    def tempo(self) -> int:
        """Number of disks on the board."""
        return self._score_dark + self._score_light

    def winner(self) -> Optional[Side]:
        """The side with more disks once the game has ended. None for a draw or a running game."""
        if not self.is_ended or self._score_dark == self._score_light:
            return None
        return Side.DARK if self._score_dark > self._score_light else Side.LIGHT

    def _outflank_length(self, coord: Coord, direction: Direction, side: Side) -> int:
        """
        Length of the run of opposing disks that a disk of `side` placed on
        `coord` would capture along `direction`; 0 if the run is not closed
        by a disk of `side`.
        """
        length = 0
        cursor = coord.step(direction)
        while cursor.is_valid():
            disk = self._board.get_cell(cursor)
            if disk is None:
                return 0
            if disk.side == side:
                return length
            length += 1
            cursor = cursor.step(direction)
        return 0

    def _outflanks(self, coord: Coord, side: Side) -> bool:
        return any(self._outflank_length(coord, direction, side) for direction in DIRECTIONS)

    def _validate(self, coord) -> Tuple[Side, List[Tuple[Direction, int]]]:
        """
        Check a move for the side to move.

        Returns:
            The moving side and the (direction, length) of every run it captures
        """
        if self._state is None:
            raise EndedGame(self)
        side = self._state
        coord = Coord(*coord)
        if self._board.get_cell(coord) is not None:
            raise CellAlreadyTaken(coord)

        runs = []
        for direction in DIRECTIONS:
            length = self._outflank_length(coord, direction, side)
            if length:
                runs.append((direction, length))
        if not runs:
            raise IllegalMove(coord)
        return side, runs

    def check_move(self, coord) -> None:
        """
        Check whether the side to move may play on a cell.

        Raises:
            EndedGame: if the game is over
            OutOfBoundCoord: if the coordinate is off the board
            CellAlreadyTaken: if the cell is occupied
            IllegalMove: if the move does not outflank any disk
        """
        self._validate(coord)

    def make_move(self, coord) -> 'Turn':
        """
        Play a move for the side to move.

        Args:
            coord: (row, col) of the cell to play

        Returns:
            The turn following the move. The side to move is the opponent,
            or the mover again if the opponent has to pass, or None if
            neither side can move.

        Raises:
            The same errors as check_move. The receiver is never modified.
        """
        side, runs = self._validate(coord)
        coord = Coord(*coord)
        board = self._board.copy()

        eaten = 0
        for direction, length in runs:
            cursor = coord
            for _ in range(length):
                cursor = cursor.step(direction)
                try:
                    board.flip_disk(cursor)
                except EmptyCell as exc:
                    raise AssertionError(
                        f"Run from {coord} towards {direction.name} was checked but {cursor} is empty"
                    ) from exc
                eaten += 1
        board.place_disk(side, coord)

        if side is Side.DARK:
            turn = Turn(board, side.opposite(), self._score_dark + eaten + 1, self._score_light - eaten)
        else:
            turn = Turn(board, side.opposite(), self._score_dark - eaten, self._score_light + eaten + 1)

        if turn.tempo == NUM_CELLS:
            # A full board leaves no move to anybody
            turn._state = None
        elif not turn.can_move(side.opposite()):
            if turn.can_move(side):
                logger.debug(f"{side.opposite().name} has no legal move and passes")
                turn._state = side
            else:
                turn._state = None

        logger.debug(f"{side.name} plays {tuple(coord)} flipping {eaten}, score {turn.score}")
        if turn.is_ended:
            logger.debug(f"Game over with score {turn.score}")
        return turn

    def can_move(self, side: Side) -> bool:
        """Whether `side` has at least one legal move on this board."""
        return any(self._outflanks(coord, side) for coord in self._board.empty_cells())

    def legal_moves(self, side: Optional[Side] = None) -> List[Coord]:
        """
        Get all legal moves.

        Args:
            side: The side to get legal moves for. If None, uses the side to move.

        Returns:
            Coordinates in row-major order. Empty if the game has ended and no side is given.
        """
        if side is None:
            if self._state is None:
                return []
            side = self._state
        return [coord for coord in self._board.empty_cells() if self._outflanks(coord, side)]

    def copy(self) -> 'Turn':
        """Create an independent copy of the turn."""
        return Turn(self._board.copy(), self._state, self._score_dark, self._score_light)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return (self._state == other._state
                and self._score_dark == other._score_dark
                and self._score_light == other._score_light
                and self._board == other._board)

    def __repr__(self) -> str:
        state = self._state.name if self._state is not None else 'ENDED'
        return f"Turn(state={state}, score_dark={self._score_dark}, score_light={self._score_light})"
