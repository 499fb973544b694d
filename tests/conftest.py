import logging

import pytest


@pytest.fixture(autouse=True)
def reset_cg2d_logger():
    """setup_logging() attaches handlers to the 'cg2d' logger; drop them after each test."""
    logger = logging.getLogger("cg2d")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)
