import pytest

from core.config import settings


@pytest.fixture
def raise_policy(monkeypatch):
    """Make register_catalog() raise typed errors instead of exiting."""
    monkeypatch.setattr(settings.i18n, "ERROR_POLICY", "raise")
    return settings.i18n
