"""Playwright E2E test fixtures for the calendar application.

This module provides fixtures for:
- Browser context setup with a phone-sized viewport
- A PlaywrightSession mapping app origins to the served app URLs
- A launched CalendarPage

The calendar app must already be served; point the session at it with:

    CALENDAR_E2E_APP_URLS='{"app://calendar.gaiamobile.org": "http://localhost:8080"}'
    CALENDAR_E2E_WAIT_FOR_KEYBOARD=false

Usage:
    @pytest.mark.e2e
    def test_month_view(calendar):
        calendar.open_month_view()
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import BrowserContext

from calendar_e2e.client.playwright_session import PlaywrightSession
from calendar_e2e.config.logging import configure_logging
from calendar_e2e.config.settings import Settings
from calendar_e2e.pages.calendar import CalendarPage

# =============================================================================
# Configuration
# =============================================================================

# Firefox OS reference phone
VIEWPORT = {"width": 320, "height": 480}


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser context for a touch device."""
    return {
        **browser_context_args,
        "viewport": VIEWPORT,
        "has_touch": True,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args: dict[str, Any]) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": os.environ.get("HEADED", "0") != "1",
        "slow_mo": int(os.environ.get("SLOW_MO", "0")),
    }


# =============================================================================
# Calendar Fixtures
# =============================================================================


@pytest.fixture
def calendar_settings() -> Settings:
    """Settings from the environment; skips when no app URL is configured."""
    settings = Settings()
    if settings.calendar_origin not in settings.app_urls:
        pytest.skip(f"No URL configured for {settings.calendar_origin}")
    configure_logging(settings)
    return settings


@pytest.fixture
def calendar_session(
    calendar_settings: Settings, context: BrowserContext
) -> PlaywrightSession:
    return PlaywrightSession(context, calendar_settings)


@pytest.fixture
def calendar(
    calendar_session: PlaywrightSession, calendar_settings: Settings
) -> Generator[CalendarPage, None, None]:
    """Launched calendar with the first-run swipe hint dismissed.

    Usage:
        def test_something(calendar):
            calendar.open_week_view()
    """
    page = CalendarPage(calendar_session, settings=calendar_settings)
    page.launch(hide_swipe_hint=True)

    yield page
