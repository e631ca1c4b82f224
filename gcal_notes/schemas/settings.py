"""
Settings schemas - the plugin settings record and the settings tab payloads.

The record itself is owned by the host and persisted through
SettingsStore; the calendar code only reads it.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# Shown instead of the stored secret / refresh token
SECRET_PLACEHOLDER = "••••••••••••••••"


# ---------------------------------------------------------------------------
# PERSISTED RECORD
# ---------------------------------------------------------------------------

class PluginSettings(BaseModel):
    """
    User-editable plugin settings.

    Example persisted form:
    {
        "clientId": "1234.apps.googleusercontent.com",
        "clientSecret": "GOCSPX-...",
        "refreshToken": "1//0eXyz...",
        "calendarIds": ["team@group.calendar.google.com"]
    }

    An empty calendar_ids list means the implicit "primary" calendar.
    """
    client_id: str = Field("", alias="clientId")
    client_secret: str = Field("", alias="clientSecret")
    refresh_token: str = Field("", alias="refreshToken")
    calendar_ids: List[str] = Field(default_factory=list, alias="calendarIds")

    class Config:
        populate_by_name = True

    def has_credentials(self) -> bool:
        """All three credential fields are non-empty."""
        return bool(self.client_id and self.client_secret and self.refresh_token)

    def effective_calendar_ids(self) -> List[str]:
        """The calendars to query: the selected ones, or ["primary"]."""
        return list(self.calendar_ids) if self.calendar_ids else ["primary"]


# ---------------------------------------------------------------------------
# SETTINGS TAB PAYLOADS
# ---------------------------------------------------------------------------

class SettingsView(BaseModel):
    """
    Settings as shown in the settings tab.

    Secrets are masked; only their presence is revealed.
    """
    client_id: str
    client_secret: str
    refresh_token: str
    calendar_ids: List[str]

    @classmethod
    def from_settings(cls, settings: PluginSettings) -> "SettingsView":
        return cls(
            client_id=settings.client_id,
            client_secret=SECRET_PLACEHOLDER if settings.client_secret else "",
            refresh_token=SECRET_PLACEHOLDER if settings.refresh_token else "",
            calendar_ids=list(settings.calendar_ids),
        )


class SettingsUpdate(BaseModel):
    """
    Partial update from the settings tab.

    Only provided fields are applied.
    """
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None


class CalendarToggle(BaseModel):
    """Enable or disable one discovered calendar."""
    enabled: bool


class CalendarOption(BaseModel):
    """A discovered, non-primary calendar and whether it is selected."""
    id: str
    summary: str
    enabled: bool
