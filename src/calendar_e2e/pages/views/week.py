from calendar_e2e.client.session import ElementHandle
from calendar_e2e.pages.views.base import View


class WeekView(View):
    """Seven-day grid."""

    selector = "#week-view"

    @property
    def events(self) -> list[ElementHandle]:
        return self.find_elements(".event")
