from typing import Any, FrozenSet, Tuple

from pysmt.shortcuts import And, Not

from board_encoding import Board
from board_symmetry import orbit
from queens_errors import ModelEvaluationError
from queens_logging import get_logger

# type declarations
Assignment = Any
pysmt_formula = Any
Placement = FrozenSet[Tuple[int, int]]

__all__ = ['extract_placement', 'check_placement', 'blocking_formula', 'decode']

log = get_logger('decoding')


def extract_placement(board: Board, assignment: Assignment) -> Placement:
    """ cells whose atom is true in assignment """
    n = board.size
    placement = frozenset((r, c) for r in range(n) for c in range(n)
                          if assignment.evaluate(board.cell(r, c)))
    check_placement(n, placement)
    return placement


def check_placement(n: int, placement: Placement):
    """ a placement decoded from a model of the board formula must be a
        full solution; anything else means the oracle or encoding is broken """
    rows = set(r for r, _ in placement)
    cols = set(c for _, c in placement)
    majors = set(r - c for r, c in placement)
    minors = set(r + c for r, c in placement)
    if len(placement) != n or len(rows) != n or len(cols) != n:
        raise ModelEvaluationError(
            'model does not place one queen per row and column: {}'.format(sorted(placement)))
    if len(majors) != n or len(minors) != n:
        raise ModelEvaluationError(
            'model places two queens on a diagonal: {}'.format(sorted(placement)))


def _forbid(board: Board, placement: Placement) -> pysmt_formula:
    return Not(And(board.cell(r, c) for r, c in sorted(placement)))

def blocking_formula(board: Board, placement: Placement, unique: bool) -> pysmt_formula:
    if not unique:
        return _forbid(board, placement)
    return And(_forbid(board, member) for member in sorted(orbit(board.size, placement), key=sorted))


def decode(board: Board, assignment: Assignment, unique: bool) -> Tuple[Placement, pysmt_formula]:
    placement = extract_placement(board, assignment)
    log.debug('placement %s', sorted(placement))
    return placement, blocking_formula(board, placement, unique)
