import pytest

from calendar_settings import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with Monday-first English settings."""
    reset_config()
    yield
    reset_config()
