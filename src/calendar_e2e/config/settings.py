"""Test-suite settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CALENDAR_ORIGIN = "app://calendar.gaiamobile.org"
KEYBOARD_ORIGIN = "app://keyboard.gaiamobile.org"


class Settings(BaseSettings):
    """calendar-e2e configuration from environment variables.

    Every field can be overridden with a ``CALENDAR_E2E_`` prefixed variable,
    e.g. ``CALENDAR_E2E_SEARCH_TIMEOUT_MS=10000``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CALENDAR_E2E_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Applications under test
    calendar_origin: str = Field(
        default=CALENDAR_ORIGIN, description="Origin of the calendar app"
    )
    keyboard_origin: str = Field(
        default=KEYBOARD_ORIGIN, description="Origin of the on-screen keyboard app"
    )
    app_urls: dict[str, str] = Field(
        default_factory=dict,
        description="Origin to URL mapping used by the Playwright session",
    )

    # Timing (milliseconds)
    search_timeout_ms: int = Field(
        default=5000, ge=1, description="Element search and wait timeout"
    )
    poll_interval_ms: int = Field(
        default=100, ge=1, description="Delay between wait polls"
    )

    # Workarounds
    wait_for_keyboard: bool = Field(
        default=True,
        description="Wait for the keyboard app to hide after saving an event",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs")

    @field_validator("calendar_origin", "keyboard_origin")
    @classmethod
    def validate_origin(cls, v: str) -> str:
        """Validate application origin format."""
        if "://" not in v:
            raise ValueError("Origin must include a scheme, e.g. app://name")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
