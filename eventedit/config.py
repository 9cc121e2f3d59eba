from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from ``EVENTEDIT_*`` environment variables and .env file.

    Only the convenience helpers read these values. ``event_edit_url`` always
    takes its zone from the caller.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVENTEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # IANA name used when a caller does not pick a zone
    default_timezone: str = "UTC"
    log_level: str = "INFO"

    @field_validator("default_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value!r}") from exc
        return value

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.default_timezone)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached Settings singleton. Created on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings. Used in tests."""
    global _settings  # noqa: PLW0603
    _settings = None


def resolve_zone(zone: tzinfo | str | None = None) -> tzinfo:
    """Turn a zone argument into a ``tzinfo``.

    ``None`` means the configured default zone and a string is looked up as
    an IANA name. ``tzinfo`` instances are returned unchanged.
    """
    if zone is None:
        return get_settings().zone
    if isinstance(zone, str):
        return ZoneInfo(zone)
    return zone
