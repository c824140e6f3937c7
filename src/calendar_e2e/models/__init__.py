"""Data models for calendar-e2e."""

from calendar_e2e.models.event import EventDescriptor, EventWindow, resolve_event_window

__all__ = ["EventDescriptor", "EventWindow", "resolve_event_window"]
