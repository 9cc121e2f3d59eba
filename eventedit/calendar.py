"""Google Calendar "create event" link generation."""

import logging
from collections.abc import Sequence
from datetime import tzinfo
from urllib.parse import quote

from eventedit.date_utils import format_timestamp
from eventedit.models.event import (
    CustomDates,
    Duration,
    EventDetails,
    NoDurationLetUserChoose,
    TimeSpan,
)

logger = logging.getLogger(__name__)

EVENT_EDIT_URL = "https://calendar.google.com/calendar/u/0/r/eventedit"


def _encode(value: str) -> str:
    # No safe characters, so "/" and "," are escaped too; spaces become %20
    return quote(value, safe="")


def resolve_dates(zone: tzinfo, duration: Duration) -> str | None:
    """Map a duration to the ``dates`` parameter value, or ``None`` to omit it."""
    match duration:
        case NoDurationLetUserChoose():
            return None
        case TimeSpan(start=start, end=end):
            return f"{format_timestamp(zone, start)}/{format_timestamp(zone, end)}"
        case CustomDates(literal=literal):
            return literal


def format_guests(guests: Sequence[str]) -> str | None:
    """Join guest addresses with commas, or return ``None`` when there are none."""
    if not guests:
        return None
    return ",".join(guests)


def event_edit_url(zone: tzinfo, event: EventDetails) -> str:
    """Build a prefilled Google Calendar event-creation URL.

    ``text`` and ``details`` are always present; ``dates`` and ``add`` only
    when there is a duration or at least one guest.

    Args:
        zone: Timezone used to render ``TimeSpan`` instants.
        event: Title, duration, details and guests of the event.

    Returns:
        A URL string meant to be opened in a browser.
    """
    params = [
        ("text", _encode(event.title)),
        ("details", _encode(event.details)),
    ]

    dates = resolve_dates(zone, event.duration)
    if dates is not None:
        params.append(("dates", _encode(dates)))

    # Guests are encoded one by one so the separating commas stay literal
    guests = format_guests([_encode(guest) for guest in event.guests])
    if guests is not None:
        params.append(("add", guests))

    logger.debug("Built event edit URL with params: %s", ", ".join(name for name, _ in params))
    query = "&".join(f"{name}={value}" for name, value in params)
    return f"{EVENT_EDIT_URL}?{query}"
