"""
Configuration module - centralized settings for the whole process.
Uses pydantic-settings to load values from environment variables and .env file.

These are process-level settings (where to persist data, which endpoints to
call, how loud to log). The user-editable calendar credentials live in the
plugin settings record instead, see gcal_notes.services.settings_store.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override, set environment variables:
        export DATA_FILE=/var/lib/gcal-notes/data.json
        export LOG_LEVEL=DEBUG
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and in the panel title
    APP_NAME: str = "Google Calendar Notes"

    # DEBUG: Enable debug mode (more verbose logging)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the "gcal" logger namespace
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # PERSISTENCE
    # ---------------------------------------------------------------------------
    # DATA_FILE: JSON file holding the plugin settings record
    # (client id, client secret, refresh token, selected calendars)
    DATA_FILE: str = "data.json"

    # ---------------------------------------------------------------------------
    # GOOGLE ENDPOINTS
    # ---------------------------------------------------------------------------
    # Token endpoint used for the refresh-token exchange
    GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"

    # Calendar v3 REST base URL
    GOOGLE_CALENDAR_API_URL: str = "https://www.googleapis.com/calendar/v3"

    # Per-request timeout for both endpoints
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # ---------------------------------------------------------------------------
    # NOTICES
    # ---------------------------------------------------------------------------
    # How long a transient notice stays visible before it is dismissed
    NOTICE_DURATION_SECONDS: float = 5.0


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from gcal_notes.core.config import settings
settings = Settings()
