import pytest

from lotto_parallel.config import clear_config


@pytest.fixture(autouse=True)
def _reset_config():
    clear_config()
    yield
    clear_config()
