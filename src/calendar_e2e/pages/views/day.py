from calendar_e2e.client.session import ElementHandle
from calendar_e2e.pages.views.base import View


class DayView(View):
    selector = "#day-view"

    @property
    def events(self) -> list[ElementHandle]:
        return self.find_elements(".event")

    @property
    def all_day_events(self) -> list[ElementHandle]:
        return self.find_elements(".allday .event")
