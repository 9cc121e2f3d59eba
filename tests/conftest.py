import pytest

from eventedit.config import reset_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the host environment and any local .env out of Settings."""
    monkeypatch.delenv("EVENTEDIT_DEFAULT_TIMEZONE", raising=False)
    monkeypatch.delenv("EVENTEDIT_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
