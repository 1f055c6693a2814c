"""Shared fixtures: isolate cached settings from the developer environment."""

import pytest

from intentguard.config.runtime import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Point the account store at a temp DB and reset the settings cache."""
    monkeypatch.setenv("INTENTGUARD_ACCOUNT_DB_PATH", str(tmp_path / "account.db"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
