"""calendar-e2e exception hierarchy.

Every failure raised by the page objects derives from CalendarE2EError so a
test runner can tell harness failures apart from its own assertions. None of
these are caught inside the library; they propagate to the calling test.
"""


class CalendarE2EError(Exception):
    """Base exception for all calendar-e2e errors."""

    pass


class ConfigurationError(CalendarE2EError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("No URL configured for app://calendar.gaiamobile.org")
    """

    pass


class ElementNotFoundError(CalendarE2EError):
    """Raised when a selector resolves to no element.

    Attributes:
        selector: The CSS selector that matched nothing.
    """

    def __init__(self, selector: str, message: str | None = None) -> None:
        self.selector = selector
        super().__init__(message or f"Element not found: {selector}")


class WaitTimeoutError(CalendarE2EError, TimeoutError):
    """Raised when a wait condition is not met within its bound.

    Attributes:
        timeout_ms: The bound that elapsed, in milliseconds.
    """

    def __init__(self, message: str, timeout_ms: int | None = None) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(message)


class InvalidArgumentError(CalendarE2EError, ValueError):
    """Raised when a page-object operation gets an unusable argument.

    Example:
        raise InvalidArgumentError("swipe needs a direction")
    """

    pass


class OverflowAssertionError(CalendarE2EError, AssertionError):
    """Raised when an element's content does not fit its container.

    Attributes:
        content: Measured content (scroll) width in pixels.
        container: Measured container (client) width in pixels.
    """

    def __init__(
        self, message: str, content: float | None, container: float | None
    ) -> None:
        self.content = content
        self.container = container
        super().__init__(message)
