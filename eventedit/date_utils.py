"""Date helpers for the ``dates`` query parameter."""

from datetime import UTC, date, datetime, timedelta, tzinfo


def format_timestamp(zone: tzinfo, instant: datetime) -> str:
    """Format an instant as ``YYYYMMDDTHHMMSS`` wall-clock time in *zone*.

    No offset or ``Z`` suffix is appended, so the zone decides which
    wall-clock values end up in the string. Microseconds are dropped,
    not rounded.

    Args:
        zone: Timezone to localize the instant to.
        instant: A timezone-aware datetime.

    Returns:
        The formatted timestamp, e.g. ``"20210205T070440"``.
    """
    local = instant.astimezone(zone)
    return (
        f"{local.year}{local.month:02d}{local.day:02d}"
        f"T{local.hour:02d}{local.minute:02d}{local.second:02d}"
    )


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    seconds, ms = divmod(millis, 1000)
    return datetime.fromtimestamp(seconds, tz=UTC) + timedelta(milliseconds=ms)


def all_day_range(first_day: date, last_day: date | None = None) -> str:
    """Build an all-day ``YYYYMMDD/YYYYMMDD`` range.

    Google Calendar treats the end date as exclusive, so the range ends the
    day after *last_day* (or the day after *first_day* for a single day).
    """
    end = (last_day or first_day) + timedelta(days=1)
    return f"{first_day:%Y%m%d}/{end:%Y%m%d}"
