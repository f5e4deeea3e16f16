from pysmt.shortcuts import Symbol
from pysmt.typing import BOOL

from board_encoding import Board, cell_name

QUEENS_4 = frozenset([(0, 1), (1, 3), (2, 0), (3, 2)])
QUEENS_8 = frozenset([(0, 0), (1, 4), (2, 7), (3, 5), (4, 2), (5, 6), (6, 1), (7, 3)])


class FakeAssignment:
    def __init__(self, values: dict):
        self.values = values

    def evaluate(self, atom) -> bool:
        return self.values[atom]


def assignment_for(board: Board, placement) -> FakeAssignment:
    return FakeAssignment({board.cell(r, c): (r, c) in placement
                           for r in range(board.size) for c in range(board.size)})


class ScriptedSession:
    """ stands in for OracleSession: replays a list of check results and
        answers each SAT with the next scripted placement """
    def __init__(self, results, placements=()):
        self.results = list(results)
        self.placements = list(placements)
        self.asserted = []
        self.pushes = 0
        self.pops = 0
        self.board = None

    def new_variable(self, name):
        return Symbol(name, BOOL)

    def push(self):
        self.pushes += 1

    def pop(self):
        self.pops += 1

    def assert_formula(self, formula):
        self.asserted.append(formula)

    def check(self):
        return self.results.pop(0)

    def get_model(self):
        return assignment_for(self.board, self.placements.pop(0))


def symbol_board(n: int) -> Board:
    return Board([[Symbol(cell_name(r, c), BOOL) for c in range(n)] for r in range(n)])

