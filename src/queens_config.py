from dataclasses import dataclass
from typing import List, Optional

from queens_errors import InvalidConfigurationError

# largest board accepted; the pairwise encoding grows as n^3
MAX_BOARD_SIZE = 256


@dataclass
class EnumerationConfig:
    """
    Settings for one enumeration run.

    Attributes:
        size: board dimension n (n x n board, n queens)
        unique: fold the 8 board symmetries into one counted solution
        solver: pysmt solver name backing the oracle
        max_solutions: stop with an error after this many solutions (None: no budget)
        verbose: log debug output
    """

    size: int = 8
    unique: bool = True
    solver: str = 'z3'
    max_solutions: Optional[int] = None
    verbose: bool = False

    def validate(self) -> List[str]:
        """ Returns a list of validation error messages (empty if valid) """
        errors = []

        if isinstance(self.size, bool) or not isinstance(self.size, int):
            errors.append('board size must be an integer, got {!r}'.format(self.size))
        elif self.size < 1:
            errors.append('board size must be positive, got {}'.format(self.size))
        elif self.size > MAX_BOARD_SIZE:
            errors.append('board size must be at most {}, got {}'.format(MAX_BOARD_SIZE, self.size))

        if self.max_solutions is not None:
            if isinstance(self.max_solutions, bool) or not isinstance(self.max_solutions, int):
                errors.append('solution budget must be an integer, got {!r}'.format(self.max_solutions))
            elif self.max_solutions < 1:
                errors.append('solution budget must be positive, got {}'.format(self.max_solutions))

        if not isinstance(self.solver, str) or not self.solver:
            errors.append('solver name must be a non-empty string')

        return errors

    def check(self):
        errors = self.validate()
        if errors:
            raise InvalidConfigurationError(errors)
        return self
