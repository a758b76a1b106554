"""Fixtures for the test suite."""

import pytest
from django.utils.functional import empty

from loops import loops, loops_handler


@pytest.fixture(autouse=True)
def _reset_lazy_loops():
    """Forget the backend built from the settings, each test may change them."""
    yield
    loops_handler.reset()
    loops._wrapped = empty
