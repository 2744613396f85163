"""
pytest configuration and fixtures for boxsize tests
"""
import logging

import pytest

from boxsize import Box, UnitOfMeasure


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests do not leak streams"""
    yield
    logger = logging.getLogger("boxsize")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def meter_box():
    """A 1 m × 2 m × 3 m box"""
    return Box(1, 2, 3, UnitOfMeasure.METER)


@pytest.fixture
def millimeter_box():
    """A 1 mm × 2 mm × 3 mm box"""
    return Box(1, 2, 3, UnitOfMeasure.MILLIMETER)
