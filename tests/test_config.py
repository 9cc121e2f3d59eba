from datetime import UTC
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from eventedit.config import Settings, get_settings, reset_settings, resolve_zone


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.default_timezone == "UTC"
        assert s.log_level == "INFO"

    def test_timezone_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EVENTEDIT_DEFAULT_TIMEZONE", "Europe/Paris")
        s = Settings(_env_file=None)
        assert s.default_timezone == "Europe/Paris"
        assert s.zone == ZoneInfo("Europe/Paris")

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EVENTEDIT_LOG_LEVEL", "DEBUG")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DEFAULT_TIMEZONE", "Asia/Tokyo")
        assert Settings(_env_file=None).default_timezone == "UTC"

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Settings(_env_file=None, default_timezone="Mars/Olympus_Mons")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("EVENTEDIT_DEFAULT_TIMEZONE=America/Chicago\nOTHER_KEY=1\n")
        s = Settings(_env_file=env_file)
        assert s.default_timezone == "America/Chicago"


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_reset_creates_new_instance(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first


class TestResolveZone:
    def test_none_uses_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("EVENTEDIT_DEFAULT_TIMEZONE", "Australia/Sydney")
        assert resolve_zone() == ZoneInfo("Australia/Sydney")

    def test_name_looked_up(self):
        assert resolve_zone("America/Phoenix") == ZoneInfo("America/Phoenix")

    def test_tzinfo_passed_through(self):
        assert resolve_zone(UTC) is UTC
