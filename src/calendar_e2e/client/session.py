"""Capability protocols consumed from the remote automation client.

The page objects never talk to a driver library directly. They depend on the
narrow surface below, which PlaywrightSession implements for real runs and
the fakes under tests/support implement for unit tests.

Scripts are JavaScript function expressions evaluated remotely, e.g.
``"() => document.hidden"`` or ``"el => el.scrollWidth"``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ElementHandle(Protocol):
    """A handle to one remote element."""

    def click(self) -> None: ...

    def script_with(self, script: str, arg: Any = None) -> Any:
        """Evaluate ``script`` remotely with the element as first argument."""
        ...

    def fill(self, value: str) -> None: ...

    def text(self) -> str: ...

    def is_displayed(self) -> bool: ...


class Apps(Protocol):
    """Application launcher of the remote environment."""

    def launch(self, origin: str) -> None: ...

    def switch_to_app(self, origin: str) -> None: ...

    def is_running(self, origin: str) -> bool: ...


class Helper(Protocol):
    """Convenience waits layered over element lookup."""

    def wait_for_element(self, selector: str) -> ElementHandle: ...


@runtime_checkable
class RemoteSession(Protocol):
    """Connection to the remote application instance.

    Attributes:
        apps: Application launcher.
        helper: Waiting helpers.
        search_timeout_ms: Bound applied to lookups and waits.
    """

    apps: Apps
    helper: Helper
    search_timeout_ms: int

    def scope(self, search_timeout: int) -> RemoteSession:
        """Return a view of this session with a different search timeout."""
        ...

    def find_element(self, selector: str) -> ElementHandle: ...

    def find_elements(self, selector: str) -> list[ElementHandle]: ...

    def execute_script(self, script: str, arg: Any = None) -> Any: ...

    def switch_to_frame(self) -> None:
        """Return focus to the top-level frame."""
        ...

    def wait_for(
        self, predicate: Callable[[], Any], timeout_ms: int | None = None
    ) -> Any: ...

    def dispatch_flick(
        self, element: ElementHandle, x1: float, y1: float, x2: float, y2: float
    ) -> None:
        """Flick from (x1, y1) to (x2, y2), relative to ``element``."""
        ...
