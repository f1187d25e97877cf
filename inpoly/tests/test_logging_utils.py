import logging
import sys

import pytest

from inpoly.core.logging_utils import configure_logging, get_logger


@pytest.fixture
def inpoly_logger():
    root = logging.getLogger('inpoly')
    saved = (list(root.handlers), root.propagate, root.level)
    yield root
    root.handlers[:] = saved[0]
    root.propagate = saved[1]
    root.setLevel(saved[2])


def _stdout_handlers(log):
    return [h for h in log.handlers
            if type(h) is logging.StreamHandler and h.stream is sys.stdout]


def test_get_logger_is_namespaced():
    assert get_logger('sweep').name == 'inpoly.sweep'
    assert get_logger('inpoly.io').name == 'inpoly.io'
    assert get_logger('inpoly.x').level == logging.NOTSET


def test_configure_logging_isolates_root(inpoly_logger):
    inpoly_logger.handlers[:] = [logging.NullHandler()]
    configure_logging('DEBUG')
    assert inpoly_logger.level == logging.DEBUG
    assert inpoly_logger.propagate is False
    assert len(_stdout_handlers(inpoly_logger)) == 1
    configure_logging('WARNING')
    assert len(_stdout_handlers(inpoly_logger)) == 1
    assert inpoly_logger.level == logging.WARNING


def test_sweep_debug_message(caplog, inpoly_logger, unit_square):
    from inpoly import classify
    inpoly_logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger='inpoly'):
        classify([[0.5, 0.5]], unit_square)
    assert any('sweep:' in r.getMessage() for r in caplog.records)
