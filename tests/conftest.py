"""
Shared fixtures.

Settings are cached with lru_cache, so any test that changes env vars
must clear the cache before and after.
"""
import pytest

from coursepath.core.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Yield a monkeypatch whose env changes are picked up by get_settings()."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
