#!/usr/bin/env python3

import argparse
import sys

from queens_config import EnumerationConfig
from queens_errors import QueensError
from queens_logging import get_logger, set_verbose
from solution_enumeration import count_solutions

log = get_logger()


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nqueens',
        description='Count n-queens solutions by repeated SAT queries.')
    parser.add_argument('-c', '--count', type=int, default=8, dest='size',
                        help='board size n (default: %(default)s)')
    parser.add_argument('-u', '--unique', action=argparse.BooleanOptionalAction,
                        default=True,
                        help='count solutions up to board symmetry (default: on)')
    parser.add_argument('-s', '--solver', type=str, default='z3',
                        help='pysmt solver backend (default: %(default)s)')
    parser.add_argument('-m', '--max-solutions', type=int, default=None,
                        dest='max_solutions',
                        help='fail once more than this many solutions are found')
    parser.add_argument('-v', '--verbose', action='store_true', dest='verbose')
    return parser


def main(argv=None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)
    config = EnumerationConfig(size=args.size, unique=args.unique, solver=args.solver,
                               max_solutions=args.max_solutions, verbose=args.verbose)
    errors = config.validate()
    if errors:
        parser.error('; '.join(errors))
    set_verbose(config.verbose)

    try:
        count = count_solutions(config)
    except QueensError as e:
        log.debug('enumeration failed', exc_info=True)
        print('error: {}'.format(e), file=sys.stderr)
        return 1

    print('Total number of solutions: {}.'.format(count))
    return 0


if __name__ == '__main__':
    sys.exit(main())
