'''
Failures that abort an enumeration. None of them is retried; the
solution counter is only meaningful once the oracle reports UNSAT.
'''

__all__ = [
    'QueensError', 'InvalidConfigurationError', 'OracleUnavailableError',
    'OracleUnknownError', 'ModelEvaluationError', 'BudgetExceededError']


class QueensError(Exception):
    pass

class InvalidConfigurationError(QueensError, ValueError):
    """ raised before any oracle interaction """
    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        QueensError.__init__(self, '; '.join(self.errors))

class OracleUnavailableError(QueensError):
    pass

class OracleUnknownError(QueensError):
    """ the oracle could neither prove nor refute satisfiability """
    def __init__(self, count: int):
        self.count = count
        QueensError.__init__(
            self, 'solver returned unknown after {} solution(s)'.format(count))

class ModelEvaluationError(QueensError):
    """ a model did not assign a definite boolean to a board cell, or the
        decoded placement breaks the board constraints """
    pass

class BudgetExceededError(QueensError):
    def __init__(self, count: int):
        self.count = count
        QueensError.__init__(
            self, 'solution budget of {} exhausted before enumeration finished'.format(count))
