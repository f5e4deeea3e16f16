from enum import Enum, auto
from typing import Any, FrozenSet, Iterator, Optional, Tuple

import board_encoding
from board_encoding import Board
from queen_constraints import board_formula
from queens_config import EnumerationConfig
from queens_errors import BudgetExceededError, OracleUnknownError
from queens_logging import get_logger
from smt_session import CheckResult, OracleSession
from solution_decoding import decode

# type declarations
Placement = FrozenSet[Tuple[int, int]]

__all__ = ['EnumerationState', 'SolutionEnumerator', 'count_solutions']

log = get_logger('enumeration')


class EnumerationState(Enum):
    INITIALIZED = auto()
    SOLUTION_FOUND = auto()
    EXHAUSTED = auto()


class SolutionEnumerator:
    """ Drives the check -> decode -> block loop. With unique set, each
        discovered placement blocks its whole symmetry class, so the
        counter advances once per class. """

    def __init__(self, session: OracleSession, board: Board, unique: bool = True,
                 max_solutions: Optional[int] = None):
        self.session = session
        self.board = board
        self.unique = unique
        self.max_solutions = max_solutions
        self.state = None
        self.count = 0

    def initialize(self):
        assert self.state is None, 'board formula already asserted'
        # one scope for the whole session, never popped
        self.session.push()
        self.session.assert_formula(board_formula(self.board))
        self.state = EnumerationState.INITIALIZED

    def solutions(self) -> Iterator[Placement]:
        """ yields each discovered placement until the oracle reports UNSAT """
        if self.state is None:
            self.initialize()

        while self.state is not EnumerationState.EXHAUSTED:
            res = self.session.check()
            if res is CheckResult.UNSAT:
                self.state = EnumerationState.EXHAUSTED
                break
            elif res is CheckResult.UNKNOWN:
                raise OracleUnknownError(self.count)

            if self.max_solutions is not None and self.count >= self.max_solutions:
                raise BudgetExceededError(self.count)

            self.state = EnumerationState.SOLUTION_FOUND
            placement, blocking = decode(self.board, self.session.get_model(), self.unique)
            self.session.assert_formula(blocking)
            self.count += 1
            self.state = EnumerationState.INITIALIZED
            yield placement

        log.debug('%s exhausted after %d solution(s)', self.board, self.count)

    def run(self) -> int:
        for _ in self.solutions():
            pass
        return self.count


def count_solutions(config: EnumerationConfig) -> int:
    config.check()
    with OracleSession(config.solver) as session:
        board = board_encoding.create(session, config.size)
        enumerator = SolutionEnumerator(session, board, config.unique, config.max_solutions)
        return enumerator.run()
