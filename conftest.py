"""
Shared pytest fixtures
"""

import logging

import pytest

from pyacping.testing import MockPongServer
from pyacping.utils.logging_config import PACKAGE_LOGGER


@pytest.fixture
def server():
    """Mock pong server with the default standard and extended replies"""
    with MockPongServer() as mock:
        yield mock


@pytest.fixture
def package_logger():
    """The pyacping logger, restored after the test"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
