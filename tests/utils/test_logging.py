import logging
import re

from geogrid.utils.logging import LOGGER, set_log_level, warn_once


def test_logger():
    assert LOGGER.name == 'geogrid'
    assert LOGGER.level == logging.WARNING


def test_set_log_level():
    try:
        set_log_level('debug')
        assert LOGGER.level == logging.DEBUG

        set_log_level(logging.ERROR)
        assert LOGGER.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_warn_once(caplog):
    warn_once('test warning')
    assert 'test warning' in caplog.text

    warn_once('test warning')
    assert len(re.findall('test warning', caplog.text)) == 1
