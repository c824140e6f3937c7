"""Shared behaviour for calendar sub-views."""

from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

import structlog

from calendar_e2e.client.session import ElementHandle, RemoteSession

log = structlog.get_logger(__name__)


@runtime_checkable
class Displayable(Protocol):
    """Anything that can be waited on until shown or hidden."""

    def wait_for_display(self) -> None: ...

    def wait_for_hide(self) -> None: ...


class View:
    """A calendar screen rooted at one element.

    Subclasses set ``selector`` to the root element of their screen. Display
    state is polled from the root element through the session's bounded wait.
    """

    selector: ClassVar[str]

    def __init__(self, session: RemoteSession) -> None:
        self.session = session

    @property
    def element(self) -> ElementHandle:
        return self.session.find_element(self.selector)

    def find_element(self, selector: str) -> ElementHandle:
        """Find an element inside this view."""
        return self.session.find_element(f"{self.selector} {selector}")

    def find_elements(self, selector: str) -> list[ElementHandle]:
        return self.session.find_elements(f"{self.selector} {selector}")

    def is_displayed(self) -> bool:
        roots = self.session.find_elements(self.selector)
        return bool(roots) and roots[0].is_displayed()

    def wait_for_display(self) -> None:
        self.session.wait_for(self.is_displayed)
        log.debug("view_displayed", view=type(self).__name__)

    def wait_for_hide(self) -> None:
        self.session.wait_for(lambda: not self.is_displayed())
        log.debug("view_hidden", view=type(self).__name__)
