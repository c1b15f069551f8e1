# This file is part of potalg
# Copyright 2010-2017, Daniele Coslovich

"""Helper functions"""

import sys
import logging
from logging import NullHandler


# Logging facilities

LOGGER_NAME = 'potalg'
DEFAULT_LOGGING_FORMAT = '[%(levelname)s/%(name)s] %(message)s'

__all__ = ['NullHandler', 'log_to_stderr', 'setup_logging', 'tipify',
           'parse_params']


def log_to_stderr(level=None):
    """
    Turn on logging and add a handler which prints to stderr
    """
    logger = logging.getLogger(LOGGER_NAME)
    formatter = logging.Formatter(DEFAULT_LOGGING_FORMAT)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if level:
        logger.setLevel(level)
    return logger


class _MyFormatter(logging.Formatter):
    def format(self, record):
        if record.levelname in ['WARNING', 'ERROR']:
            return '# ' + record.levelname + ' ' + record.getMessage()
        else:
            return '# ' + record.getMessage()


def setup_logging(name=None, level=40, filename=None, update=False):
    """Logging API."""
    if name is None:
        log = logging.getLogger(LOGGER_NAME)
    else:
        log = logging.getLogger(name)

    if update:
        # We only update the level of the logger
        log.setLevel(level)
        return log
    else:
        # The logger should always pass messages to all handlers
        current_level = log.getEffectiveLevel()
        log.setLevel(min(level, current_level))

    formatter = _MyFormatter()
    if filename is None:
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.FileHandler(filename)

    handler.setFormatter(formatter)
    handler.setLevel(level)
    log.addHandler(handler)

    return log


def tipify(s):
    """
    Convert a string into the best matching type.

    Example:
    -------
        2 -> int
        2.32 -> float
        text -> str

    The only risk is if a variable is required to be float,
    but is passed without dot.
    """
    try:
        return int(s)
    except ValueError:
        try:
            return float(s)
        except ValueError:
            return s


def parse_params(parameters):
    """
    Return a dict of parameters from `parameters`.

    `parameters` is either a dict, which is copied, or a string of
    comma separated `key=value` pairs, e.g. "epsilon=1.0,sigma=1". The
    values are converted with `tipify()`.
    """
    if isinstance(parameters, dict):
        return dict(parameters)

    param_dict = {}
    if parameters is None or len(parameters.strip()) == 0:
        return param_dict
    for param in parameters.split(','):
        if '=' not in param:
            raise ValueError('malformed parameter {!r} in {!r}'.format(param, parameters))
        key, value = param.split('=', 1)
        param_dict[key.strip()] = tipify(value.strip())
    return param_dict
