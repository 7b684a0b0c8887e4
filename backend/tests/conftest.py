"""Root conftest — shared test configuration."""

import pytest

from app.config import get_settings

_CONFIG_VARS = (
    "NODE_ENV", "OPENSTATES_API_KEY", "LEGISCAN_API_KEY", "DATABASE_URL",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Start every test with no secrets set and a fresh settings cache."""
    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def set_env(monkeypatch):
    """Set environment variables and invalidate the cached settings."""

    def _set(**values: str) -> None:
        for name, value in values.items():
            monkeypatch.setenv(name, value)
        get_settings.cache_clear()

    return _set
