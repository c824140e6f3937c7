"""Gesture actor for touch-style interactions."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from calendar_e2e.client.session import ElementHandle, RemoteSession

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Flick:
    """One queued flick gesture, coordinates relative to ``element``."""

    element: ElementHandle
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass
class Actions:
    """Queue gestures and replay them against a session.

    Example:
        Actions(session).flick(body, 48, 128, 0, 128).perform()
    """

    session: RemoteSession
    _queue: list[Flick] = field(default_factory=list)

    def flick(
        self, element: ElementHandle, x1: float, y1: float, x2: float, y2: float
    ) -> Actions:
        self._queue.append(Flick(element, x1, y1, x2, y2))
        return self

    def perform(self) -> Actions:
        """Dispatch every queued gesture in order and clear the queue."""
        queue, self._queue = self._queue, []
        for gesture in queue:
            log.debug(
                "gesture_flick",
                start=(gesture.x1, gesture.y1),
                end=(gesture.x2, gesture.y2),
            )
            self.session.dispatch_flick(
                gesture.element, gesture.x1, gesture.y1, gesture.x2, gesture.y2
            )
        return self
