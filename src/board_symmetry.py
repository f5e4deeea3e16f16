from enum import Enum, auto
from typing import FrozenSet, Iterable, Tuple

from queens_logging import get_logger

'''
The 8 symmetries of the square board (the dihedral group of order 8),
each a pure mapping of a cell (row, col) on an n x n board.

FLIP_ROWS reverses the row index (horizontal flip), FLIP_COLUMNS the
column index (vertical flip). TRANSPOSE swaps row and column across the
main diagonal, ANTI_TRANSPOSE across the anti-diagonal. The rotations
are the compositions of a flip with a transpose.
'''

# type declarations
Cell = Tuple[int, int]
Placement = FrozenSet[Cell]

__all__ = ['Transform', 'map_cell', 'apply', 'compose', 'orbit']

log = get_logger('symmetry')


class Transform(Enum):
    IDENTITY = auto()
    ROTATE_90 = auto()
    ROTATE_180 = auto()
    ROTATE_270 = auto()
    FLIP_ROWS = auto()
    FLIP_COLUMNS = auto()
    TRANSPOSE = auto()
    ANTI_TRANSPOSE = auto()


def map_cell(transform: Transform, n: int, row: int, col: int) -> Cell:
    m = n - 1
    if transform is Transform.IDENTITY:
        return (row, col)
    elif transform is Transform.ROTATE_90:
        return (col, m - row)
    elif transform is Transform.ROTATE_180:
        return (m - row, m - col)
    elif transform is Transform.ROTATE_270:
        return (m - col, row)
    elif transform is Transform.FLIP_ROWS:
        return (m - row, col)
    elif transform is Transform.FLIP_COLUMNS:
        return (row, m - col)
    elif transform is Transform.TRANSPOSE:
        return (col, row)
    elif transform is Transform.ANTI_TRANSPOSE:
        return (m - col, m - row)
    else:
        assert False, 'unknown transform {}'.format(transform)


def apply(transform: Transform, n: int, placement: Iterable[Cell]) -> Placement:
    return frozenset(map_cell(transform, n, r, c) for r, c in placement)


def compose(first: Transform, second: Transform) -> Transform:
    """ the transform equal to applying first, then second """
    # the 3x3 board already tells all 8 transforms apart
    cells = [(r, c) for r in range(3) for c in range(3)]
    target = [map_cell(second, 3, *map_cell(first, 3, r, c)) for r, c in cells]
    for t in Transform:
        if [map_cell(t, 3, r, c) for r, c in cells] == target:
            return t
    assert False, 'transforms not closed under composition'


def orbit(n: int, placement: Iterable[Cell]) -> FrozenSet[Placement]:
    """ distinct placements equivalent to placement under the board's symmetries """
    placement = frozenset(placement)
    members = frozenset(apply(t, n, placement) for t in Transform)
    log.debug('orbit of size %d', len(members))
    return members
