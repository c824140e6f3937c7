from calendar_e2e.client.session import ElementHandle
from calendar_e2e.pages.views.base import View


class MonthView(View):
    """Month grid."""

    selector = "#month-view"

    @property
    def current_day(self) -> ElementHandle:
        return self.find_element("li.present")

    @property
    def days(self) -> list[ElementHandle]:
        return self.find_elements("li[data-date]")
