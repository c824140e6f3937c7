"""Remote automation client surface used by the page objects.

Usage:
    from calendar_e2e.client import Actions, PlaywrightSession

    session = PlaywrightSession(context)
    actions = Actions(session)
"""

from calendar_e2e.client.actions import Actions
from calendar_e2e.client.playwright_session import PlaywrightElement, PlaywrightSession
from calendar_e2e.client.session import Apps, ElementHandle, Helper, RemoteSession

__all__ = [
    "Actions",
    "Apps",
    "ElementHandle",
    "Helper",
    "PlaywrightElement",
    "PlaywrightSession",
    "RemoteSession",
]
