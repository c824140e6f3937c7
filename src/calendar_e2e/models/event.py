"""Event descriptor used to fill the calendar's event form.

The descriptor is transient input to CalendarPage.create_event: it is relayed
field by field into the application's edit form and never stored.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DURATION_HOURS = 1


class EventDescriptor(BaseModel):
    """Options for creating an event.

    Either ``start_date`` or ``start_hour`` (an hour of today) picks the
    start; either ``end_date`` or ``duration`` (hours) picks the end.
    camelCase keys (``startDate``, ``startHour``...) are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    title: str = Field(description="Event title")
    location: str | None = Field(default=None, description="Event location")
    description: str | None = Field(default=None, description="Event notes")
    start_date: datetime | None = Field(
        default=None, alias="startDate", description="Event start"
    )
    end_date: datetime | None = Field(
        default=None, alias="endDate", description="Event end"
    )
    start_hour: int | None = Field(
        default=None,
        ge=0,
        le=23,
        alias="startHour",
        description="Shortcut for an event starting today at this hour",
    )
    duration: float | None = Field(
        default=None, gt=0, description="Length of the event in hours"
    )
    reminders: list[str] = Field(
        default_factory=list, description="Presets like '5 minutes before'"
    )


@dataclass(frozen=True)
class EventWindow:
    """Resolved start and end of an event."""

    start: datetime
    end: datetime


def resolve_event_window(
    descriptor: EventDescriptor, now: datetime | None = None
) -> EventWindow:
    """Work out the effective start and end of an event.

    Args:
        descriptor: Event options.
        now: Wall-clock time used when no start date is given.

    Returns:
        EventWindow with the start and end to type into the form.

    Example:
        resolve_event_window(EventDescriptor(title="x", start_hour=9, duration=2))
        # EventWindow(start=<today 09:00>, end=<today 11:00>)
    """
    if descriptor.start_date is not None:
        start = descriptor.start_date
    else:
        start = now or datetime.now()
        # start_hour can be zero
        if descriptor.start_hour is not None:
            start = start.replace(
                hour=descriptor.start_hour, minute=0, second=0, microsecond=0
            )

    if descriptor.end_date is not None:
        end = descriptor.end_date
    else:
        duration = descriptor.duration or DEFAULT_DURATION_HOURS
        end = start + timedelta(hours=duration)

    return EventWindow(start=start, end=end)
