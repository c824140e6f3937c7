"""Read-only event details screen."""

from calendar_e2e.pages.views.base import View


class ReadEventView(View):
    selector = "#event-view"

    @property
    def title(self) -> str:
        return self.find_element(".title .content").text()

    @property
    def location(self) -> str:
        return self.find_element(".location .content").text()

    @property
    def description(self) -> str:
        return self.find_element(".description .content").text()

    def edit(self) -> None:
        self.find_element("button.edit").click()
