"""Shared pytest configuration for the Combodate test suite."""

import pytest

from combodate.log import setup_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structlog to stderr at warning level for every test."""
    setup_logging("warning")
    yield
