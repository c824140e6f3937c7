"""
Wait Helpers

Polling and condition-waiting utilities.
Inspired by Cypress recurse pattern.
"""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from calendar_e2e.core.exceptions import WaitTimeoutError

T = TypeVar("T")


def wait_for_condition(
    action: Callable[[], T],
    condition: Callable[[T], bool] = bool,
    timeout_ms: int = 5000,
    poll_interval_ms: int = 100,
    error_message: str = "Condition not met within timeout",
) -> T:
    """
    Poll an action until condition is met.

    Args:
        action: Function to call repeatedly
        condition: Function that returns True when condition is met
            (defaults to truthiness of the result)
        timeout_ms: Maximum time to wait
        poll_interval_ms: Time between polls
        error_message: Message for timeout error

    Returns:
        The result of action() when condition is met

    Raises:
        WaitTimeoutError: If condition not met within timeout

    Example:
        # Wait for the keyboard document to report itself hidden
        wait_for_condition(
            action=lambda: session.execute_script("return document.hidden"),
            timeout_ms=5000,
        )
    """
    deadline = time.monotonic() + timeout_ms / 1000
    last_result: T | None = None

    while True:
        last_result = action()

        if condition(last_result):
            return last_result

        if time.monotonic() >= deadline:
            break

        time.sleep(poll_interval_ms / 1000)

    raise WaitTimeoutError(
        f"{error_message} after {timeout_ms}ms. Last result: {last_result!r}",
        timeout_ms=timeout_ms,
    )
