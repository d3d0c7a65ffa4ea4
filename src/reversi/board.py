"""
Board module for Reversi.
Geometry (sides, coordinates, directions) and the 8x8 grid of cells.
The grid is pure storage: it knows nothing about the rules of the game.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, List, NamedTuple, Optional, Tuple
import numpy as np

from .errors import CellAlreadyTaken, EmptyCell, OutOfBoundCoord, OutOfBoundIndex

# Number of cells per side of the board
BOARD_SIZE = 8
# Total number of cells
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Side(IntEnum):
    """One of the two competing parties. Values are the ones stored in the grid."""
    DARK = 1
    LIGHT = 2

    def opposite(self) -> 'Side':
        """Return the other side."""
        return Side(3 - self.value)


class Direction(Enum):
    """
    The eight compass directions as (row, col) unit steps.
    Rows grow southward, so moving NE from (4, 5) leads to (3, 6).
    """
    NORTH = (-1, 0)
    NE = (-1, 1)
    EAST = (0, 1)
    SE = (1, 1)
    SOUTH = (1, 0)
    SW = (1, -1)
    WEST = (0, -1)
    NW = (-1, -1)


# Scan order used by the rule engine
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


class Coord(NamedTuple):
    """Coordinates of a cell, (row, col), 0-based in matrix convention."""
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> 'Coord':
        """
        Build a coordinate from a row-major cell index.

        Args:
            index: Cell index in [0, NUM_CELLS)

        Returns:
            The matching coordinate

        Raises:
            OutOfBoundIndex: if the index does not name a cell
        """
        if not 0 <= index < NUM_CELLS:
            raise OutOfBoundIndex(index)
        row, col = divmod(index, BOARD_SIZE)
        return cls(row, col)

    @classmethod
    def all(cls) -> Iterator['Coord']:
        """Iterate over every cell of the board in row-major order."""
        for index in range(NUM_CELLS):
            yield cls.from_index(index)

    def to_index(self) -> int:
        """Row-major index of the cell."""
        return self.row * BOARD_SIZE + self.col

    def is_valid(self) -> bool:
        """Check both lower and upper bounds."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def step(self, direction: Direction) -> 'Coord':
        """Return the neighbouring coordinate along a direction. Not bound-checked."""
        drow, dcol = direction.value
        return Coord(self.row + drow, self.col + dcol)


@dataclass(frozen=True)
class Disk:
    """A placed piece, showing one side."""
    side: Side

    def flipped(self) -> 'Disk':
        """Return the same disk turned on its other side."""
        return Disk(self.side.opposite())


class Board:
    """
    8x8 grid of cells backed by a numpy array.
    A cell holds EMPTY or the value of the side owning the disk on it.
    Boards are plain values: copies never share their grid.
    """

    SIZE = BOARD_SIZE
    EMPTY = 0

    def __init__(self, cells=None):
        """
        Initialize a board.

        Args:
            cells: Optional 8x8 array-like of EMPTY / Side values to copy.
                   An empty board is created when omitted.
        """
        if cells is None:
            self._cells = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
            return

        grid = np.asarray(cells)
        if grid.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got shape {grid.shape}")
        # Check before casting: out of range values would wrap around in int8
        if not np.isin(grid, (self.EMPTY, int(Side.DARK), int(Side.LIGHT))).all():
            raise ValueError("Board cells must be EMPTY, Side.DARK or Side.LIGHT")
        self._cells = grid.astype(np.int8)

    def _locate(self, coord) -> Tuple[int, int]:
        row, col = coord
        # Negative indexes must not wrap around like numpy would
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise OutOfBoundCoord(Coord(row, col))
        return row, col

    def get_cell(self, coord) -> Optional[Disk]:
        """
        Get the content of a cell.

        Args:
            coord: (row, col) of the cell

        Returns:
            The disk on the cell, or None if the cell is empty

        Raises:
            OutOfBoundCoord: if the coordinate is off the board
        """
        value = self._cells[self._locate(coord)]
        if value == self.EMPTY:
            return None
        return Disk(Side(int(value)))

    def get_disk(self, coord) -> Disk:
        """Get the disk on a cell, raising EmptyCell if there is none."""
        disk = self.get_cell(coord)
        if disk is None:
            raise EmptyCell(Coord(*coord))
        return disk

    def place_disk(self, side: Side, coord) -> None:
        """Place a new disk of the given side on an empty cell."""
        row, col = self._locate(coord)
        if self._cells[row, col] != self.EMPTY:
            raise CellAlreadyTaken(Coord(row, col))
        self._cells[row, col] = Side(side).value

    def flip_disk(self, coord) -> None:
        """Turn the disk on a non-empty cell to the opposite side."""
        row, col = self._locate(coord)
        value = self._cells[row, col]
        if value == self.EMPTY:
            raise EmptyCell(Coord(row, col))
        self._cells[row, col] = 3 - value

    def count(self, side: Optional[Side] = None) -> int:
        """
        Count disks on the board.

        Args:
            side: Only count the disks of this side. If None, counts every disk.
        """
        if side is None:
            return int(np.count_nonzero(self._cells))
        return int(np.count_nonzero(self._cells == int(side)))

    def empty_cells(self) -> List[Coord]:
        """Coordinates of every empty cell, in row-major order."""
        return [Coord(int(r), int(c)) for r, c in np.argwhere(self._cells == self.EMPTY)]

    def cells(self) -> np.ndarray:
        """Read-only copy of the grid. Writing to it never affects the board."""
        grid = self._cells.copy()
        grid.flags.writeable = False
        return grid

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board.__new__(Board)
        new_board._cells = self._cells.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board({self._cells.tolist()})"
