import pytest

from logger import get_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    log = get_logger()
    log.set_level("INFO")
    log.set_stream(None)
    yield
    log.set_level("INFO")
    log.set_stream(None)
