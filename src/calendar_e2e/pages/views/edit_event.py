"""Event create/edit form.

Fields are set through explicit setters, or all at once with ``fill()``.
Date and time inputs get their value assigned by script followed by ``input``
and ``change`` events, because native date pickers do not accept typing.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

import structlog

from calendar_e2e.client.session import ElementHandle
from calendar_e2e.core.exceptions import ElementNotFoundError, InvalidArgumentError
from calendar_e2e.pages.views.base import View

log = structlog.get_logger(__name__)

SET_VALUE_SCRIPT = """(el, value) => {
  el.value = value;
  el.dispatchEvent(new Event('input', { bubbles: true }));
  el.dispatchEvent(new Event('change', { bubbles: true }));
}"""

SELECT_OPTION_SCRIPT = """(el, label) => {
  const option = Array.from(el.options).find(o => o.textContent.trim() === label);
  if (!option) {
    return false;
  }
  el.value = option.value;
  el.dispatchEvent(new Event('change', { bubbles: true }));
  return true;
}"""

REMINDER_SELECTOR = 'select[name="alarm[]"]'


class EditEventView(View):
    """Form used both to add and to modify an event.

    Example:
        edit = EditEventView(session)
        edit.wait_for_display()
        edit.fill(title="Standup", start=start, end=end)
        edit.save()
    """

    selector = "#modify-event-view"

    def _input(self, name: str) -> ElementHandle:
        return self.find_element(f'[name="{name}"]')

    def _set_value(self, name: str, value: str) -> None:
        self._input(name).script_with(SET_VALUE_SCRIPT, value)

    def set_title(self, title: str) -> None:
        self._input("title").fill(title)

    def set_location(self, location: str) -> None:
        self._input("location").fill(location)

    def set_description(self, description: str) -> None:
        self._input("description").fill(description)

    def set_start_date(self, value: datetime) -> None:
        self._set_value("startDate", value.strftime("%Y-%m-%d"))

    def set_start_time(self, value: datetime) -> None:
        self._set_value("startTime", value.strftime("%H:%M"))

    def set_end_date(self, value: datetime) -> None:
        self._set_value("endDate", value.strftime("%Y-%m-%d"))

    def set_end_time(self, value: datetime) -> None:
        self._set_value("endTime", value.strftime("%H:%M"))

    def set_reminders(self, reminders: Sequence[str]) -> None:
        """Choose reminder presets, one per ``alarm[]`` select.

        The form adds an empty select after each chosen reminder, so the
        selects are looked up again for every preset.

        Raises:
            ElementNotFoundError: If the form offers no select for a preset.
            InvalidArgumentError: If a preset is not one of the options.
        """
        for index, preset in enumerate(reminders):
            selects = self.find_elements(REMINDER_SELECTOR)
            if index >= len(selects):
                raise ElementNotFoundError(
                    f"{self.selector} {REMINDER_SELECTOR}",
                    f"No reminder select for preset #{index + 1} ({preset!r})",
                )
            if not selects[index].script_with(SELECT_OPTION_SCRIPT, preset):
                raise InvalidArgumentError(f"Unknown reminder preset: {preset!r}")

    def fill(
        self,
        title: str,
        start: datetime,
        end: datetime,
        location: str = "",
        description: str = "",
        reminders: Sequence[str] = (),
    ) -> None:
        """Populate the whole form in the order the application expects."""
        self.set_title(title)
        self.set_location(location)
        self.set_description(description)
        self.set_start_date(start)
        self.set_start_time(start)
        self.set_end_date(end)
        self.set_end_time(end)
        self.set_reminders(reminders)
        log.debug("event_form_filled", title=title, start=start.isoformat())

    def save(self) -> None:
        self.find_element("button.save").click()

    def cancel(self) -> None:
        self.find_element("button.cancel").click()
