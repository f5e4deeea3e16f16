from typing import Any, Iterator, List, Tuple

from queens_config import EnumerationConfig
from queens_logging import get_logger

# type declarations
OracleSession = Any
pysmt_formula = Any

__all__ = ['Board', 'cell_name', 'create']

log = get_logger('board')


def cell_name(row: int, col: int) -> str:
    return 'q_{}_{}'.format(row, col)


class Board:
    """ n x n grid of boolean atoms, row-major; atom (r, c) is true iff
        a queen stands on row r, column c """

    def __init__(self, grid: List[List[pysmt_formula]]):
        self.grid = grid
        self.size = len(grid)
        self.coords = dict()
        for r, row in enumerate(grid):
            assert len(row) == self.size
            for c, atom in enumerate(row):
                assert atom not in self.coords, 'aliased cell {}'.format(atom)
                self.coords[atom] = (r, c)

    def __str__(self):
        return 'Board({0}x{0})'.format(self.size)

    def cell(self, row: int, col: int) -> pysmt_formula:
        return self.grid[row][col]

    def rows(self) -> List[List[pysmt_formula]]:
        return [list(row) for row in self.grid]

    def columns(self) -> List[List[pysmt_formula]]:
        return [[self.grid[r][c] for r in range(self.size)] for c in range(self.size)]

    def atoms(self) -> Iterator[pysmt_formula]:
        for row in self.grid:
            yield from row

    def coordinates_of(self, atom: pysmt_formula) -> Tuple[int, int]:
        return self.coords[atom]


def create(session: OracleSession, n: int) -> Board:
    """ declare the n^2 cell atoms in session's namespace """
    EnumerationConfig(size=n).check()
    grid = [[session.new_variable(cell_name(r, c)) for c in range(n)]
            for r in range(n)]
    log.debug('declared %d cell atoms for %dx%d board', n * n, n, n)
    return Board(grid)
