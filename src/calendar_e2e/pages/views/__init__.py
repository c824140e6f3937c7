"""Sub-view page objects, one per calendar screen."""

from calendar_e2e.pages.views.advanced_settings import AdvancedSettingsView
from calendar_e2e.pages.views.base import Displayable, View
from calendar_e2e.pages.views.day import DayView
from calendar_e2e.pages.views.edit_event import EditEventView
from calendar_e2e.pages.views.month import MonthView
from calendar_e2e.pages.views.month_day import MonthDayView
from calendar_e2e.pages.views.read_event import ReadEventView
from calendar_e2e.pages.views.week import WeekView

__all__ = [
    "AdvancedSettingsView",
    "DayView",
    "Displayable",
    "EditEventView",
    "MonthDayView",
    "MonthView",
    "ReadEventView",
    "View",
    "WeekView",
]
