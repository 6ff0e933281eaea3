import pytest

from typegate.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from the developer's TYPEGATE_* environment."""
    for key in ("TYPEGATE_LOG_LEVEL", "TYPEGATE_LOG_JSON", "TYPEGATE_TRACE"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
