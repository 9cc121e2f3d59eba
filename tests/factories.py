from eventedit.models.event import EventDetails

EPOCH_MILLIS = 1612508680856  # 2021-02-05T07:04:40.856Z

DETAILS = "Details about the event.\n\nMight contain newlines."


def make_event(**overrides: object) -> EventDetails:
    defaults: dict = {
        "title": "Some event",
        "details": DETAILS,
    }
    defaults.update(overrides)
    return EventDetails(**defaults)
