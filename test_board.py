"""
Tests for the board, coordinates and directions.
"""
import numpy as np
import pytest

from reversi.board import BOARD_SIZE, DIRECTIONS, NUM_CELLS, Board, Coord, Direction, Disk, Side
from reversi.errors import CellAlreadyTaken, EmptyCell, OutOfBoundCoord, OutOfBoundIndex


def test_side_opposite():
    assert Side.DARK.opposite() is Side.LIGHT
    assert Side.LIGHT.opposite() is Side.DARK
    for side in Side:
        assert side.opposite().opposite() is side


def test_disk_flipped():
    disk = Disk(Side.DARK)
    assert disk.flipped() == Disk(Side.LIGHT)
    assert disk.flipped().flipped() == disk


def test_direction_order():
    """Directions are scanned clockwise starting from North."""
    assert DIRECTIONS == (
        Direction.NORTH, Direction.NE, Direction.EAST, Direction.SE,
        Direction.SOUTH, Direction.SW, Direction.WEST, Direction.NW,
    )
    # Unit steps, all distinct
    assert len({d.value for d in DIRECTIONS}) == 8
    for direction in DIRECTIONS:
        drow, dcol = direction.value
        assert max(abs(drow), abs(dcol)) == 1


def test_coord_step():
    assert Coord(4, 5).step(Direction.NE) == Coord(3, 6)
    assert Coord(4, 5).step(Direction.SOUTH) == (5, 5)
    # Stepping does not check bounds
    off_board = Coord(0, 0).step(Direction.NW)
    assert off_board == (-1, -1)
    assert not off_board.is_valid()
    assert not Coord(0, BOARD_SIZE).is_valid()
    assert Coord(7, 7).is_valid()


def test_coord_index():
    assert Coord.from_index(0) == (0, 0)
    assert Coord.from_index(11) == (1, 3)
    assert Coord.from_index(NUM_CELLS - 1) == (7, 7)
    assert Coord(5, 2).to_index() == 42
    assert [c.to_index() for c in Coord.all()] == list(range(NUM_CELLS))

    with pytest.raises(OutOfBoundIndex) as excinfo:
        Coord.from_index(NUM_CELLS)
    assert excinfo.value.index == NUM_CELLS
    with pytest.raises(OutOfBoundIndex):
        Coord.from_index(-1)


def test_place_and_flip():
    board = Board()
    assert board.count() == 0

    board.place_disk(Side.DARK, Coord(0, 0))
    assert board.get_cell(Coord(0, 0)) == Disk(Side.DARK)
    assert board.get_disk((0, 0)).side is Side.DARK

    board.flip_disk(Coord(0, 0))
    assert board.get_cell(Coord(0, 0)).side is Side.LIGHT
    assert board.count(Side.LIGHT) == 1
    assert board.count(Side.DARK) == 0

    with pytest.raises(CellAlreadyTaken) as excinfo:
        board.place_disk(Side.DARK, Coord(0, 0))
    assert excinfo.value.coord == (0, 0)
    # The failed placement left the disk alone
    assert board.get_cell(Coord(0, 0)).side is Side.LIGHT


def test_empty_cell_errors():
    board = Board()
    assert board.get_cell(Coord(3, 3)) is None
    with pytest.raises(EmptyCell):
        board.flip_disk(Coord(3, 3))
    with pytest.raises(EmptyCell):
        board.get_disk(Coord(3, 3))


@pytest.mark.parametrize("coord", [(8, 0), (0, 8), (-1, 0), (0, -1), (10, 10)])
def test_out_of_bound_coord(coord):
    board = Board()
    with pytest.raises(OutOfBoundCoord) as excinfo:
        board.get_cell(coord)
    assert excinfo.value.coord == coord
    with pytest.raises(OutOfBoundCoord):
        board.place_disk(Side.DARK, coord)
    with pytest.raises(OutOfBoundCoord):
        board.flip_disk(coord)
    assert board.count() == 0


def test_copy_is_independent():
    board = Board()
    board.place_disk(Side.DARK, Coord(2, 2))
    other = board.copy()
    assert other == board

    other.flip_disk(Coord(2, 2))
    other.place_disk(Side.LIGHT, Coord(5, 5))
    assert other != board
    assert board.get_cell(Coord(2, 2)).side is Side.DARK
    assert board.get_cell(Coord(5, 5)) is None


def test_cells_view_is_read_only():
    board = Board()
    board.place_disk(Side.LIGHT, Coord(1, 2))
    cells = board.cells()
    assert cells.shape == (BOARD_SIZE, BOARD_SIZE)
    assert cells[1, 2] == Side.LIGHT
    with pytest.raises(ValueError):
        cells[0, 0] = int(Side.DARK)
    assert board.get_cell(Coord(0, 0)) is None


def test_board_from_cells():
    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)
    grid[0, 0] = int(Side.DARK)
    grid[7, 7] = int(Side.LIGHT)
    board = Board(grid)
    assert board.get_cell(Coord(0, 0)).side is Side.DARK
    assert board.get_cell(Coord(7, 7)).side is Side.LIGHT
    assert board.empty_cells()[0] == (0, 1)
    assert len(board.empty_cells()) == NUM_CELLS - 2

    # The grid is copied
    grid[0, 0] = int(Side.LIGHT)
    assert board.get_cell(Coord(0, 0)).side is Side.DARK

    with pytest.raises(ValueError):
        Board(np.zeros((7, 8), dtype=int))
    grid[3, 3] = 5
    with pytest.raises(ValueError):
        Board(grid)


def test_board_rejects_values_wrapping_into_sides():
    # 257 and -255 would wrap to Side.DARK once stored as int8
    for value in (257, -255, 258):
        grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)
        grid[0, 0] = value
        with pytest.raises(ValueError):
            Board(grid)


def test_cells_cannot_reach_the_board():
    board = Board()
    board.place_disk(Side.LIGHT, Coord(1, 2))
    cells = board.cells()
    cells.flags.writeable = True
    cells[0, 0] = int(Side.DARK)
    cells[1, 2] = int(Side.DARK)
    assert board.get_cell(Coord(0, 0)) is None
    assert board.get_cell(Coord(1, 2)).side is Side.LIGHT
