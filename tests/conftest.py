import pytest

from envkey.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep ENVKEY_* variables from the developer's shell out of the tests."""
    for name in ("ENVKEY_ENV_PATH", "ENVKEY_MAX_ATTEMPTS", "ENVKEY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
