from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import AfterValidator, AwareDatetime, BaseModel, ConfigDict, Field

from eventedit.date_utils import all_day_range, from_epoch_millis
from eventedit.models.enums import DurationKind


def _check_convertible(instant: datetime) -> datetime:
    # Any zone shifts wall-clock time by less than a day, so this keeps
    # astimezone() inside datetime's supported range.
    if not 2 <= instant.year <= 9998:
        raise ValueError(f"Instant out of supported range (years 2-9998): {instant}")
    return instant


Instant = Annotated[AwareDatetime, AfterValidator(_check_convertible)]


class NoDurationLetUserChoose(BaseModel):
    """No date constraint; the calendar UI picks the slot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[DurationKind.NONE] = DurationKind.NONE


class TimeSpan(BaseModel):
    """Explicit start and end instants."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[DurationKind.TIME_SPAN] = DurationKind.TIME_SPAN
    start: Instant
    end: Instant

    @classmethod
    def from_epoch_millis(cls, start_ms: int, end_ms: int) -> "TimeSpan":
        return cls(start=from_epoch_millis(start_ms), end=from_epoch_millis(end_ms))


class CustomDates(BaseModel):
    """A pre-formatted ``dates`` value, used verbatim.

    Nothing checks the literal. This is how all-day events are expressed,
    e.g. ``"20240101/20240102"``.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[DurationKind.CUSTOM] = DurationKind.CUSTOM
    literal: str

    @classmethod
    def all_day(cls, first_day: date, last_day: date | None = None) -> "CustomDates":
        return cls(literal=all_day_range(first_day, last_day))


Duration = Annotated[
    NoDurationLetUserChoose | TimeSpan | CustomDates,
    Field(discriminator="kind"),
]


class EventDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    duration: Duration = NoDurationLetUserChoose()
    details: str = ""
    guests: tuple[str, ...] = ()
