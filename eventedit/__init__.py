"""Prefilled Google Calendar "create event" links."""

from eventedit.calendar import event_edit_url, format_guests, resolve_dates
from eventedit.config import Settings, get_settings, resolve_zone
from eventedit.date_utils import all_day_range, format_timestamp, from_epoch_millis
from eventedit.log import setup_logging
from eventedit.models import (
    CustomDates,
    Duration,
    DurationKind,
    EventDetails,
    NoDurationLetUserChoose,
    TimeSpan,
)

__all__ = [
    "CustomDates",
    "Duration",
    "DurationKind",
    "EventDetails",
    "NoDurationLetUserChoose",
    "Settings",
    "TimeSpan",
    "all_day_range",
    "event_edit_url",
    "format_guests",
    "format_timestamp",
    "from_epoch_millis",
    "get_settings",
    "resolve_dates",
    "resolve_zone",
    "setup_logging",
]
