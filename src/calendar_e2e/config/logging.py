"""structlog setup for test runs.

Page objects log through ``structlog.get_logger(__name__)``; this only decides
how those events are rendered. Call it once per run, e.g. from a conftest.
"""

import logging

import structlog

from calendar_e2e.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Render page-object events at ``settings.log_level``.

    Debug runs get colourless console lines that read well in pytest's
    captured output; anything else gets one JSON object per event for CI logs.
    """
    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if settings.debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
