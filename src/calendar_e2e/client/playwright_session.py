"""Playwright implementation of the remote session protocols.

Each application origin (``app://calendar.gaiamobile.org``) is mapped to a URL
through ``Settings.app_urls`` and opened in its own page of one browser
context. Switching apps brings that page to the front and routes every later
lookup and script through it.

Example:
    with sync_playwright() as p:
        context = p.chromium.launch().new_context()
        session = PlaywrightSession(context)
        CalendarPage(session).launch()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog
from playwright.sync_api import BrowserContext, Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from calendar_e2e.config.settings import Settings, get_settings
from calendar_e2e.core.exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    InvalidArgumentError,
    WaitTimeoutError,
)
from calendar_e2e.core.wait import wait_for_condition

log = structlog.get_logger(__name__)

FLICK_STEPS = 10


class PlaywrightElement:
    """ElementHandle over a Playwright locator."""

    def __init__(self, locator: Locator, timeout_ms: int) -> None:
        self.locator = locator
        self.timeout_ms = timeout_ms

    def click(self) -> None:
        self.locator.click(timeout=self.timeout_ms)

    def script_with(self, script: str, arg: Any = None) -> Any:
        return self.locator.evaluate(script, arg, timeout=self.timeout_ms)

    def fill(self, value: str) -> None:
        self.locator.fill(value, timeout=self.timeout_ms)

    def text(self) -> str:
        return self.locator.inner_text(timeout=self.timeout_ms)

    def is_displayed(self) -> bool:
        return self.locator.is_visible()

    def bounding_box(self) -> dict[str, float]:
        box = self.locator.bounding_box(timeout=self.timeout_ms)
        if box is None:
            raise InvalidArgumentError("Element has no bounding box (not rendered)")
        return dict(box)


@dataclass
class _BrowserState:
    """Mutable state shared by a session and all of its scoped views."""

    context: BrowserContext
    app_urls: dict[str, str]
    pages: dict[str, Page] = field(default_factory=dict)
    current: Page | None = None


class PlaywrightApps:
    """Launch and switch between application pages."""

    def __init__(self, state: _BrowserState) -> None:
        self._state = state

    def launch(self, origin: str) -> None:
        page = self._state.pages.get(origin)
        if page is None or page.is_closed():
            url = self._state.app_urls.get(origin)
            if url is None:
                raise ConfigurationError(f"No URL configured for {origin}")
            page = self._state.context.new_page()
            page.goto(url)
            self._state.pages[origin] = page
            log.info("app_launched", origin=origin, url=url)
        self._state.current = page

    def switch_to_app(self, origin: str) -> None:
        page = self._state.pages.get(origin)
        if page is None or page.is_closed():
            raise ConfigurationError(f"App is not running: {origin}")
        page.bring_to_front()
        self._state.current = page
        log.debug("app_switched", origin=origin)

    def is_running(self, origin: str) -> bool:
        page = self._state.pages.get(origin)
        return page is not None and not page.is_closed()


class PlaywrightHelper:
    """Element waits for a PlaywrightSession."""

    def __init__(self, session: PlaywrightSession) -> None:
        self._session = session

    def wait_for_element(self, selector: str) -> PlaywrightElement:
        timeout_ms = self._session.search_timeout_ms
        locator = self._session.page.locator(selector).first
        try:
            locator.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(
                f"Element {selector} not displayed after {timeout_ms}ms",
                timeout_ms=timeout_ms,
            ) from e
        return PlaywrightElement(locator, timeout_ms)


class PlaywrightSession:
    """RemoteSession backed by a Playwright browser context.

    Attributes:
        apps: Application launcher sharing this session's pages.
        helper: Waiting helpers bound to this session's timeout.
        search_timeout_ms: Bound applied to lookups and waits.
    """

    def __init__(
        self,
        context: BrowserContext,
        settings: Settings | None = None,
        page: Page | None = None,
        *,
        _state: _BrowserState | None = None,
        _search_timeout_ms: int | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if _state is None:
            _state = _BrowserState(context=context, app_urls=dict(self.settings.app_urls))
            _state.current = page
        self._state = _state
        self.search_timeout_ms = _search_timeout_ms or self.settings.search_timeout_ms
        self.apps = PlaywrightApps(self._state)
        self.helper = PlaywrightHelper(self)

    @property
    def page(self) -> Page:
        """Page of the application that currently has focus."""
        if self._state.current is None:
            raise ConfigurationError("No application launched in this session")
        return self._state.current

    def scope(self, search_timeout: int) -> PlaywrightSession:
        return PlaywrightSession(
            self._state.context,
            self.settings,
            _state=self._state,
            _search_timeout_ms=search_timeout,
        )

    def find_element(self, selector: str) -> PlaywrightElement:
        locator = self.page.locator(selector).first
        try:
            locator.wait_for(state="attached", timeout=self.search_timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotFoundError(selector) from e
        return PlaywrightElement(locator, self.search_timeout_ms)

    def find_elements(self, selector: str) -> list[PlaywrightElement]:
        return [
            PlaywrightElement(locator, self.search_timeout_ms)
            for locator in self.page.locator(selector).all()
        ]

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self.page.evaluate(script, arg)

    def switch_to_frame(self) -> None:
        # Scripts always run in the main frame of the focused page
        log.debug("switch_to_top_frame")

    def wait_for(
        self, predicate: Callable[[], Any], timeout_ms: int | None = None
    ) -> Any:
        return wait_for_condition(
            action=predicate,
            timeout_ms=timeout_ms or self.search_timeout_ms,
            poll_interval_ms=self.settings.poll_interval_ms,
        )

    def dispatch_flick(
        self, element: Any, x1: float, y1: float, x2: float, y2: float
    ) -> None:
        if not isinstance(element, PlaywrightElement):
            raise InvalidArgumentError("Flick target must come from this session")
        box = element.bounding_box()
        mouse = self.page.mouse
        mouse.move(box["x"] + x1, box["y"] + y1)
        mouse.down()
        mouse.move(box["x"] + x2, box["y"] + y2, steps=FLICK_STEPS)
        mouse.up()
