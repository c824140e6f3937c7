"""Calendar application page object.

CalendarPage is the single entry point test scripts use to drive the calendar
app: launching it, switching views, creating events, and a couple of helpers
used by visual regression tests (overflow checks, swipes).

Every action returns the page itself so calls can be chained:

    calendar.launch(hide_swipe_hint=True)
    calendar.open_month_view().swipe_left().swipe_right()
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

import structlog
from pydantic import ValidationError

from calendar_e2e.client.actions import Actions
from calendar_e2e.client.session import ElementHandle, RemoteSession
from calendar_e2e.config.settings import Settings, get_settings
from calendar_e2e.core.exceptions import InvalidArgumentError, OverflowAssertionError
from calendar_e2e.models.event import EventDescriptor, resolve_event_window
from calendar_e2e.pages.views import (
    AdvancedSettingsView,
    DayView,
    EditEventView,
    MonthDayView,
    MonthView,
    ReadEventView,
    WeekView,
)

log = structlog.get_logger(__name__)

# Pixels of slack allowed between content and container width (rounding)
OVERFLOW_TOLERANCE_PX = 1

# Swipes happen on a horizontal line at this fraction of the viewport height
SWIPE_Y_RATIO = 0.2

MEASURE_WIDTH_SCRIPT = "el => ({ content: el.scrollWidth, container: el.clientWidth })"
BODY_SIZE_SCRIPT = (
    "() => ({ height: document.body.clientHeight, width: document.body.clientWidth })"
)
DOCUMENT_HIDDEN_SCRIPT = "() => document.hidden"


class SwipeDirection(str, Enum):
    """Direction of a horizontal swipe."""

    LEFT = "left"
    RIGHT = "right"


def format_date(value: date) -> str:
    """Format a date as zero-padded ``MM/DD/YYYY``.

    Example:
        format_date(date(2014, 1, 5))  # "01/05/2014"
    """
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def swipe_coordinates(
    size: dict[str, float], direction: SwipeDirection | str
) -> tuple[float, float, float, float]:
    """Compute start and end points of a swipe across the body.

    Args:
        size: Body ``height`` and ``width`` in pixels.
        direction: "left" or "right".

    Returns:
        (x1, y1, x2, y2) where (x1, y1) is the swipe start.

    Raises:
        InvalidArgumentError: If direction is neither left nor right.
    """
    try:
        direction = SwipeDirection(direction)
    except ValueError as e:
        raise InvalidArgumentError(
            f"swipe needs a direction (left or right), got {direction!r}"
        ) from e

    y1 = y2 = size["height"] * SWIPE_Y_RATIO
    if direction is SwipeDirection.LEFT:
        x1 = size["width"] * 0.2
        x2 = 0.0
    else:
        x1 = size["width"] * 0.8
        x2 = size["width"]
    return x1, y1, x2, y2


class CalendarPage:
    """Page object for the calendar application.

    Holds a scoped view of the caller's session (bounded search timeout) and
    one sub-view object per screen. Sub-views can be replaced with any
    Displayable stand-in, which is how the unit tests drive this class.

    Attributes:
        session: Scoped session used for every lookup.
        actions: Gesture actor used for swipes.
        origin: Origin of the calendar application.
    """

    def __init__(
        self,
        session: RemoteSession,
        settings: Settings | None = None,
        actions: Actions | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session.scope(search_timeout=self.settings.search_timeout_ms)
        self.actions = actions or Actions(self.session)
        self.origin = self.settings.calendar_origin

        self.advanced_settings = AdvancedSettingsView(session)
        self.day = DayView(session)
        self.edit_event = EditEventView(session)
        self.month = MonthView(session)
        self.month_day = MonthDayView(session)
        self.read_event = ReadEventView(session)
        self.week = WeekView(session)

    # -------------------------------------------------------------------------
    # Launch
    # -------------------------------------------------------------------------

    def launch(self, hide_swipe_hint: bool = False) -> CalendarPage:
        """Start the app and wait for its document body.

        Args:
            hide_swipe_hint: Dismiss the first-run "swipe to navigate" hint.
        """
        self.session.apps.launch(self.origin)
        self.session.apps.switch_to_app(self.origin)

        # Body present means the app is really launched
        self.session.helper.wait_for_element("body")

        if hide_swipe_hint:
            self.session.helper.wait_for_element("#hint-swipe-to-navigate").click()

        log.info("calendar_launched", origin=self.origin)
        return self

    # -------------------------------------------------------------------------
    # Elements
    # -------------------------------------------------------------------------

    @property
    def add_event_button(self) -> ElementHandle:
        return self.session.find_element('#time-header a[href="/event/add/"]')

    @property
    def header_content(self) -> ElementHandle:
        return self.session.find_element("#current-month-year")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _click_view_selector(self, href: str) -> None:
        self.session.find_element(f'#view-selector a[href="{href}"]').click()

    def open_day_view(self) -> CalendarPage:
        self._click_view_selector("/day/")
        self.day.wait_for_display()
        return self

    def open_month_view(self) -> CalendarPage:
        self._click_view_selector("/month/")
        self.month.wait_for_display()
        return self

    def open_week_view(self) -> CalendarPage:
        self._click_view_selector("/week/")
        self.week.wait_for_display()
        return self

    def open_advanced_settings_view(self) -> CalendarPage:
        self.session.find_element('#time-header a[href="/settings/"]').click()
        self.session.find_element('#settings a[href="/advanced-settings/"]').click()
        self.advanced_settings.wait_for_display()
        return self

    def click_today(self) -> CalendarPage:
        """Jump to today. Unlike the open_* methods this does not wait."""
        self._click_view_selector("#today")
        return self

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def create_event(
        self, descriptor: EventDescriptor | dict[str, Any] | None = None, **options: Any
    ) -> CalendarPage:
        """Create an event through the add-event form.

        Accepts an EventDescriptor, a dict of its fields, or the fields as
        keyword arguments:

            calendar.create_event(title="Lunch", start_hour=12, duration=0.5)

        Failures in any step propagate; the form may be left half filled.

        Raises:
            InvalidArgumentError: If the options do not describe an event.
        """
        if isinstance(descriptor, EventDescriptor):
            if options:
                raise InvalidArgumentError(
                    f"Pass either an EventDescriptor or keyword options, not both: "
                    f"{sorted(options)}"
                )
        else:
            try:
                descriptor = EventDescriptor.model_validate({**(descriptor or {}), **options})
            except ValidationError as e:
                raise InvalidArgumentError(f"Invalid event options: {e}") from e

        window = resolve_event_window(descriptor)

        self.add_event_button.click()
        edit_event = self.edit_event
        edit_event.wait_for_display()
        edit_event.fill(
            title=descriptor.title,
            start=window.start,
            end=window.end,
            location=descriptor.location or "",
            description=descriptor.description or "",
            reminders=descriptor.reminders,
        )
        edit_event.save()

        if self.settings.wait_for_keyboard:
            self.wait_for_keyboard_hide()
        edit_event.wait_for_hide()

        log.info(
            "event_created",
            title=descriptor.title,
            start=window.start.isoformat(),
            end=window.end.isoformat(),
        )
        return self

    # -------------------------------------------------------------------------
    # Assertions and helpers
    # -------------------------------------------------------------------------

    def check_overflow(
        self, element: ElementHandle, message: str | None = None
    ) -> CalendarPage:
        """Assert that the element's content fits its container.

        Raises:
            OverflowAssertionError: If either width is zero, or content and
                container differ by more than one pixel.
        """
        prefix = f"{message}: " if message else ""

        # Detached elements measure as None
        width = element.script_with(MEASURE_WIDTH_SCRIPT) or {}
        content, container = width.get("content"), width.get("container")
        if not content:
            raise OverflowAssertionError(
                f"{prefix}invalid content width", content, container
            )
        if not container:
            raise OverflowAssertionError(
                f"{prefix}invalid container width", content, container
            )
        if abs(content - container) > OVERFLOW_TOLERANCE_PX:
            raise OverflowAssertionError(
                f"{prefix}content ({content}px) is wider than container ({container}px)",
                content,
                container,
            )
        return self

    def wait_for_keyboard_hide(self) -> CalendarPage:
        """Block until the on-screen keyboard app reports itself hidden.

        Closing the form while the keyboard is still animating away can send
        the next click to the wrong place on slow machines. This only narrows
        that window; it is bounded by the session timeout like any other wait.
        Returns at once when the keyboard app is not running at all.
        """
        session = self.session

        # A keyboard app that is not running cannot be showing
        if not session.apps.is_running(self.settings.keyboard_origin):
            log.debug("keyboard_not_running", origin=self.settings.keyboard_origin)
            return self

        # Only the top-level frame can switch apps
        session.switch_to_frame()
        session.apps.switch_to_app(self.settings.keyboard_origin)
        session.wait_for(lambda: session.execute_script(DOCUMENT_HIDDEN_SCRIPT))

        session.switch_to_frame()
        session.apps.switch_to_app(self.origin)
        log.debug("keyboard_hidden")
        return self

    def format_date(self, value: date) -> str:
        return format_date(value)

    def swipe_left(self) -> CalendarPage:
        return self._swipe(SwipeDirection.LEFT)

    def swipe_right(self) -> CalendarPage:
        return self._swipe(SwipeDirection.RIGHT)

    def _swipe(self, direction: SwipeDirection | str) -> CalendarPage:
        size = self.session.execute_script(BODY_SIZE_SCRIPT)
        x1, y1, x2, y2 = swipe_coordinates(size, direction)

        body = self.session.find_element("body")
        self.actions.flick(body, x1, y1, x2, y2).perform()
        log.debug("swiped", direction=direction, start=(x1, y1), end=(x2, y2))
        return self
