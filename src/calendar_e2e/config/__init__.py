"""Configuration module for calendar-e2e.

Usage:
    from calendar_e2e.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.calendar_origin)
"""

from calendar_e2e.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
