"""Shared fixtures for py_rand tests."""

import pytest
import structlog

from py_rand.config import get_settings
from py_rand.utils.random import reset_system_random


@pytest.fixture(autouse=True)
def clean_state():
    """Give every test default logging, fresh settings and no shared generator."""
    get_settings.cache_clear()
    reset_system_random()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
    reset_system_random()
