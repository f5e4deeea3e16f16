from enum import Enum, auto

from pysmt.environment import get_env, push_env, pop_env
from pysmt.exceptions import (NoSolverAvailableError, PysmtException,
                              SolverReturnedUnknownResultError)
from pysmt.logics import QF_BOOL
from pysmt.shortcuts import Solver, Symbol
from pysmt.typing import BOOL

from queens_errors import ModelEvaluationError, OracleUnavailableError
from queens_logging import get_logger

__all__ = ['CheckResult', 'Assignment', 'OracleSession']

log = get_logger('smt')


class CheckResult(Enum):
    SAT = auto()
    UNSAT = auto()
    UNKNOWN = auto()


class Assignment:
    """ Snapshot of a satisfying model taken right after a SAT check """
    def __init__(self, model):
        self.model = model

    def evaluate(self, atom) -> bool:
        try:
            value = self.model.get_value(atom)
        except PysmtException as e:
            raise ModelEvaluationError(
                'cannot evaluate {} in model: {}'.format(atom, e)) from e
        if not value.is_bool_constant():
            raise ModelEvaluationError(
                'model assigns non-boolean value {} to {}'.format(value, atom))
        return value.is_true()


class OracleSession:
    """ Owns the solver, its assertion stack and the variable namespace.
        Entering the session pushes a private pysmt environment, so the
        symbols and formulas built while it is open belong to it alone. """

    def __init__(self, solver_name: str = 'z3'):
        self.solver_name = solver_name
        self.env = None
        self.solver = None
        self.names = dict()
        self.assertions = 0
        self.depth = 0
        self.last_result = None

    def __enter__(self):
        push_env()
        self.env = get_env()
        try:
            self.solver = Solver(name=self.solver_name, logic=QF_BOOL)
        except BaseException as e:
            pop_env()
            self.env = None
            if isinstance(e, NoSolverAvailableError):
                raise OracleUnavailableError(
                    'solver {!r} is not available: {}'.format(self.solver_name, e)) from e
            raise
        log.debug('opened %s session', self.solver_name)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            self.solver.exit()
        finally:
            self.solver = None
            pop_env()
            self.env = None
        log.debug('closed session after %d assertions', self.assertions)

    def new_variable(self, name: str):
        if name in self.names:
            raise ValueError('variable {!r} already declared in this session'.format(name))
        atom = Symbol(name, BOOL)
        self.names[name] = atom
        return atom

    def assert_formula(self, formula):
        self.solver.add_assertion(formula)
        self.assertions += 1
        self.last_result = None

    def push(self):
        self.solver.push()
        self.depth += 1

    def pop(self):
        if self.depth == 0:
            raise ValueError('pop without matching push')
        self.solver.pop()
        self.depth -= 1

    def check(self) -> CheckResult:
        try:
            res = self.solver.solve()
        except SolverReturnedUnknownResultError:
            self.last_result = CheckResult.UNKNOWN
        else:
            self.last_result = CheckResult.SAT if res else CheckResult.UNSAT
        return self.last_result

    def get_model(self) -> Assignment:
        if self.last_result != CheckResult.SAT:
            raise ModelEvaluationError('no model: last check was {}'.format(self.last_result))
        return Assignment(self.solver.get_model())
