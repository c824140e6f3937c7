"""Page objects for driving the calendar application in end-to-end tests."""

__version__ = "0.1.0"
