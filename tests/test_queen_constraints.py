from collections import Counter

import pytest
from pysmt.shortcuts import And, Not

import board_encoding
from queen_constraints import (board_formula, column_formula, diagonal_formula,
                               diagonal_pairs, major_diagonal, minor_diagonal,
                               row_formula)
from smt_session import CheckResult, OracleSession


def test_major_diagonals():
    assert major_diagonal(4, 0) == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert major_diagonal(4, 3) == [(3, 0)]
    assert major_diagonal(4, -3) == [(0, 3)]
    assert major_diagonal(4, -1) == [(0, 1), (1, 2), (2, 3)]


def test_minor_diagonals():
    assert minor_diagonal(4, 0) == [(0, 0)]
    assert minor_diagonal(4, 6) == [(3, 3)]
    assert minor_diagonal(4, 3) == [(0, 3), (1, 2), (2, 1), (3, 0)]
    assert minor_diagonal(4, 4) == [(1, 3), (2, 2), (3, 1)]


@pytest.mark.parametrize('n', [1, 2, 5, 8])
def test_each_cell_on_one_diagonal_of_each_family(n):
    majors = Counter(cell for d in range(-(n - 1), n) for cell in major_diagonal(n, d))
    minors = Counter(cell for s in range(2 * n - 1) for cell in minor_diagonal(n, s))
    cells = set((r, c) for r in range(n) for c in range(n))
    assert set(majors) == cells and set(majors.values()) == {1}
    assert set(minors) == cells and set(minors.values()) == {1}


@pytest.mark.parametrize('n,expected', [(1, 0), (2, 2), (4, 28), (8, 280)])
def test_diagonal_pair_count(n, expected):
    pairs = list(diagonal_pairs(n))
    assert len(pairs) == expected
    assert len(set(frozenset(p) for p in pairs)) == expected


def test_diagonal_pairs_share_a_diagonal():
    for (r1, c1), (r2, c2) in diagonal_pairs(6):
        assert (r1, c1) != (r2, c2)
        assert r1 - c1 == r2 - c2 or r1 + c1 == r2 + c2


def _check(n, *formulas):
    with OracleSession() as session:
        board = board_encoding.create(session, n)
        for make in formulas:
            session.assert_formula(make(board))
        return session.check()

def _empty(board):
    return And(Not(atom) for atom in board.atoms())


def test_row_needs_a_queen():
    assert _check(4, row_formula, _empty) is CheckResult.UNSAT

def test_two_queens_in_a_row():
    pair = lambda board: And(board.cell(2, 0), board.cell(2, 3))
    assert _check(4, row_formula, pair) is CheckResult.UNSAT
    assert _check(4, column_formula, pair) is CheckResult.SAT

def test_two_queens_in_a_column():
    pair = lambda board: And(board.cell(0, 1), board.cell(3, 1))
    assert _check(4, column_formula, pair) is CheckResult.UNSAT
    assert _check(4, row_formula, pair) is CheckResult.SAT

def test_diagonals_may_be_empty():
    assert _check(4, diagonal_formula, _empty) is CheckResult.SAT

def test_two_queens_on_a_diagonal():
    major = lambda board: And(board.cell(0, 1), board.cell(2, 3))
    minor = lambda board: And(board.cell(0, 3), board.cell(3, 0))
    assert _check(4, diagonal_formula, major) is CheckResult.UNSAT
    assert _check(4, diagonal_formula, minor) is CheckResult.UNSAT
    assert _check(4, row_formula, column_formula, major) is CheckResult.SAT


@pytest.mark.parametrize('n,expected', [
    (1, CheckResult.SAT),
    (2, CheckResult.UNSAT),
    (3, CheckResult.UNSAT),
    (4, CheckResult.SAT),
])
def test_board_formula(n, expected):
    assert _check(n, board_formula) is expected
