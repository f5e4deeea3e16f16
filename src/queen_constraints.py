import logging
from itertools import combinations
from typing import Any, Iterator, List, Tuple

from pysmt.shortcuts import And, Not, Or

from board_encoding import Board
from queens_logging import get_logger

'''
Boolean encoding of the n-queens conditions over a Board.

Rows and columns get "exactly one": a definedness clause (the OR of the
line) plus a uniqueness clause NOT(a AND b) for every pair on the line.
Diagonals only get uniqueness since a diagonal may stay empty.

Major diagonals hold the cells with constant row - col, minor diagonals
the cells with constant row + col.
'''

# type declarations
pysmt_formula = Any
Cell = Tuple[int, int]

__all__ = [
    'exactly_one', 'at_most_one', 'row_formula', 'column_formula',
    'diagonal_formula', 'board_formula', 'major_diagonal', 'minor_diagonal',
    'diagonal_pairs']

log = get_logger('constraints')


def at_most_one(atoms: List[pysmt_formula]) -> pysmt_formula:
    return And(Not(And(a, b)) for a, b in combinations(atoms, 2))

def exactly_one(atoms: List[pysmt_formula]) -> pysmt_formula:
    return And(Or(atoms), at_most_one(atoms))


def row_formula(board: Board) -> pysmt_formula:
    return And(exactly_one(row) for row in board.rows())

def column_formula(board: Board) -> pysmt_formula:
    return And(exactly_one(col) for col in board.columns())


# ==========
# Diagonals
# ==========

def major_diagonal(n: int, d: int) -> List[Cell]:
    """ cells with row - col == d, for d in -(n-1)..(n-1) """
    return [(r, r - d) for r in range(max(0, d), min(n, n + d))]

def minor_diagonal(n: int, s: int) -> List[Cell]:
    """ cells with row + col == s, for s in 0..2n-2 """
    return [(r, s - r) for r in range(max(0, s - n + 1), min(n, s + 1))]

def diagonals(n: int) -> Iterator[List[Cell]]:
    for d in range(-(n - 1), n):
        yield major_diagonal(n, d)
    for s in range(0, 2 * n - 1):
        yield minor_diagonal(n, s)

def diagonal_pairs(n: int) -> Iterator[Tuple[Cell, Cell]]:
    """ every unordered pair of cells sharing a diagonal, once """
    for diagonal in diagonals(n):
        yield from combinations(diagonal, 2)

def diagonal_formula(board: Board) -> pysmt_formula:
    return And(Not(And(board.cell(*a), board.cell(*b)))
               for a, b in diagonal_pairs(board.size))


def board_formula(board: Board) -> pysmt_formula:
    formula = And(row_formula(board), column_formula(board), diagonal_formula(board))
    if log.isEnabledFor(logging.DEBUG):
        log.debug('%s: formula of size %d', board, formula.size())
    return formula
