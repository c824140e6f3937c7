"""
Page Objects

Page Object Model (POM) for the calendar application.
Encapsulates screen interactions and selectors.

Usage:
    from calendar_e2e.pages import CalendarPage

    calendar = CalendarPage(session)
    calendar.launch(hide_swipe_hint=True)
    calendar.open_month_view().swipe_left()

Pattern:
    - One class per screen/view
    - Methods for actions (click, fill), returning self for chaining
    - Properties for element handles
    - Assertions as methods
"""

from calendar_e2e.pages.calendar import CalendarPage, SwipeDirection, format_date

__all__ = ["CalendarPage", "SwipeDirection", "format_date"]
