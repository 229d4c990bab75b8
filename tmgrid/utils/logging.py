"""Logging utility for tmgrid"""

__all__ = ['LOGGER', 'set_log_level']

import logging

LOGGER = logging.getLogger('tmgrid')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)


def set_log_level(level) -> None:
    """
    Sets the verbosity of every tmgrid logger. Accepts either a logging level
    constant or its name, e.g. 'INFO'.
    """
    if isinstance(level, str):
        level = level.upper()
    LOGGER.setLevel(level)
