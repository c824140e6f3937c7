from calendar_e2e.client.session import ElementHandle
from calendar_e2e.pages.views.base import View


class AdvancedSettingsView(View):
    """Accounts and sync frequency settings."""

    selector = "#advanced-settings-view"

    @property
    def sync_frequency(self) -> ElementHandle:
        return self.find_element('select[name="syncFrequency"]')

    @property
    def accounts(self) -> list[ElementHandle]:
        return self.find_elements(".account-list li")
