from calendar_e2e.client.session import ElementHandle
from calendar_e2e.pages.views.base import View


class MonthDayView(View):
    """Agenda of the day selected in the month grid."""

    selector = "#months-day-view"

    @property
    def events(self) -> list[ElementHandle]:
        return self.find_elements(".event")
