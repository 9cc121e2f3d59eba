from eventedit.models.enums import DurationKind
from eventedit.models.event import (
    CustomDates,
    Duration,
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
    "TimeSpan",
]
