import pytest

from bazaar.core.logging.builder import setup_logging
from ..test_fixtures.settings import make_test_settings


@pytest.fixture(autouse=True)
def restore_logging():
    """Tests here reinstall logging; put the session configuration back afterwards."""
    yield
    setup_logging(make_test_settings())
