"""Debug logging for activitybox.

Menus, prompts and results all go to stdout through Rich, so log records
are kept on stderr and stay silent below WARNING unless --verbose is given.
The root logger is left alone.
"""

import logging
import sys

LOGGER_NAME = "activitybox"
LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route the package logger to stderr; DEBUG when verbose, else WARNING.

    Safe to call more than once (each CLI invocation does).
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers[:] = [handler]
    logger.propagate = False
    return logger
