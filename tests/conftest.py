import pytest
from loguru import logger

from byte_amount.utils.console import PACKAGE


@pytest.fixture
def records():
    """Loguru records emitted by the package while the test runs."""
    captured = []

    logger.enable(PACKAGE)
    sink = logger.add(lambda m: captured.append(m.record), level='TRACE')

    yield captured

    logger.remove(sink)
    logger.disable(PACKAGE)


@pytest.fixture
def reset_logger():
    yield

    logger.remove()
    logger.disable(PACKAGE)
