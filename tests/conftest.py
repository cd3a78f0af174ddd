"""Root conftest — shared test configuration."""

import os

import pytest

from decint.config import get_settings

# Ensure a developer's environment doesn't leak into settings-driven tests
for _key in list(os.environ):
    if _key.upper().startswith("DECINT_"):
        del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """get_settings() is lru_cached; clear it around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
