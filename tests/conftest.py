"""Shared pytest fixtures for calendar-e2e tests.

This module provides fixtures for:
- Isolated settings (no .env or CALENDAR_E2E_* leakage)
- A fake remote session recording every interaction
- A CalendarPage wired to fake sub-views

Usage:
    def test_something(calendar_page, fake_session):
        calendar_page.open_month_view()
        assert ("wait_for_display", "month") in fake_session.calls
"""

import os
from collections.abc import Generator

import pytest

from calendar_e2e.config.settings import Settings, get_settings
from calendar_e2e.pages.calendar import CalendarPage
from tests.support.fakes import FakeEditEventView, FakeSession, FakeView

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Drop CALENDAR_E2E_* variables and the settings cache around unit tests.

    E2E tests read their target URLs from the environment and are left alone.
    """
    if request.node.get_closest_marker("e2e"):
        yield
        return

    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("CALENDAR_E2E_"):
            del os.environ[key]
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


# =============================================================================
# Session and Page Fixtures
# =============================================================================


@pytest.fixture
def fake_session() -> FakeSession:
    """Fake session with the calendar chrome (body, header, view selector)."""
    session = FakeSession()
    session.add("body")
    session.add("#current-month-year", text="January 2014")
    session.add('#time-header a[href="/event/add/"]')
    session.add('#time-header a[href="/settings/"]')
    session.add('#settings a[href="/advanced-settings/"]')
    for href in ("/day/", "/week/", "/month/", "#today"):
        session.add(f'#view-selector a[href="{href}"]')
    session.scripts["() => document.hidden"] = True
    return session


@pytest.fixture
def calendar_page(fake_session: FakeSession, settings: Settings) -> CalendarPage:
    """CalendarPage whose sub-views are recording fakes."""
    page = CalendarPage(fake_session, settings=settings)
    for name in ("day", "week", "month", "month_day", "read_event", "advanced_settings"):
        setattr(page, name, FakeView(name, fake_session.calls))
    page.edit_event = FakeEditEventView(fake_session.calls)  # type: ignore[assignment]
    return page
