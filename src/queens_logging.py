import logging
import os
import sys

ROOT_LOGGER = 'nqueens'
LEVEL_VARIABLE = 'NQUEENS_LOG_LEVEL'


def get_logger(name: str = None) -> logging.Logger:
    """
    Returns a logger below the 'nqueens' root. The root gets one stderr
    handler on first use; its level comes from NQUEENS_LOG_LEVEL.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        level_str = os.getenv(LEVEL_VARIABLE, 'WARNING').upper()
        root.setLevel(getattr(logging, level_str, logging.WARNING))
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%dT%H:%M:%SZ'))
        root.addHandler(handler)
        root.propagate = False

    if name is None:
        return root
    return root.getChild(name)


def set_verbose(verbose: bool):
    if verbose:
        get_logger().setLevel(logging.DEBUG)
