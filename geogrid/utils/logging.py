"""Logging utility for geogrid"""

__all__ = ['LOGGER', 'set_log_level', 'warn_once']

import logging
from typing import Union

LOGGER = logging.getLogger('geogrid')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(
    logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
)
LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted through warn_once
_WARNINGS = set()


def set_log_level(level: Union[int, str]):
    """
    Sets the level of the geogrid logger and its console handler, e.g.
    logging.DEBUG to see each MGRS string as it is decoded.
    """
    if isinstance(level, str):
        level = level.upper()

    LOGGER.setLevel(level)
    _LOG_HANDLER.setLevel(level)


def warn_once(warning: str):
    """Logs a warning the first time a given message is seen"""
    if warning in _WARNINGS:
        return

    _WARNINGS.add(warning)
    LOGGER.warning(warning)
