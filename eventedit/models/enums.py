from enum import StrEnum


class DurationKind(StrEnum):
    NONE = "none"
    TIME_SPAN = "time_span"
    CUSTOM = "custom"
