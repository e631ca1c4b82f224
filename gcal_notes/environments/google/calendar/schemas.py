"""
Google Calendar Schemas - Data structures for calendar operations.

These Pydantic models represent Google Calendar API responses
in a clean, typed format for use throughout the application.

Reference: https://developers.google.com/calendar/api/v3/reference
"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class EventTime(BaseModel):
    """
    Event start or end time.

    Google Calendar API returns times in one of two formats:
    - dateTime: For timed events (e.g., "2024-01-15T10:00:00-05:00")
    - date: For all-day events (e.g., "2024-01-15")

    dateTime is kept as the raw RFC3339 string: merged event lists are
    ordered by comparing these strings directly.
    """
    date_time: Optional[str] = Field(None, alias="dateTime")
    date: Optional[str] = Field(None)  # YYYY-MM-DD format for all-day events
    time_zone: Optional[str] = Field(None, alias="timeZone")

    def is_all_day(self) -> bool:
        """Check if this is an all-day event (date only, no time)."""
        return self.date is not None and self.date_time is None

    def get_datetime(self) -> Optional[datetime]:
        """Get the datetime, parsing the date string if needed."""
        if self.date_time:
            return datetime.fromisoformat(self.date_time)
        if self.date:
            return datetime.strptime(self.date, "%Y-%m-%d")
        return None

    class Config:
        populate_by_name = True


class CalendarEvent(BaseModel):
    """
    A Google Calendar event.

    Contains the fields of the events resource that are rendered, plus
    calendar_name, which is set locally to the display name of the calendar
    the event was fetched from.

    Reference: https://developers.google.com/calendar/api/v3/reference/events
    """
    id: Optional[str] = Field(None, description="Unique event identifier")
    summary: Optional[str] = Field(None, description="Event title")

    # Times
    start: Optional[EventTime] = Field(None, description="Event start time")
    end: Optional[EventTime] = Field(None, description="Event end time")

    # Meeting info
    hangout_link: Optional[str] = Field(None, alias="hangoutLink")

    # Conference data (for Meet/Zoom links)
    conference_data: Optional[Dict[str, Any]] = Field(None, alias="conferenceData")

    # Set locally: display name of the source calendar (or its raw id)
    calendar_name: Optional[str] = Field(None, alias="calendarName")

    class Config:
        populate_by_name = True

    def is_all_day(self) -> bool:
        """Check if this is an all-day event."""
        if self.start:
            return self.start.is_all_day()
        return False

    def is_timed(self) -> bool:
        """True when both start and end carry a dateTime."""
        return bool(
            self.start and self.start.date_time
            and self.end and self.end.date_time
        )

    def sort_key(self) -> str:
        """Timed start if present, else the all-day date, else ""."""
        if not self.start:
            return ""
        return self.start.date_time or self.start.date or ""

    def get_display_title(self, fallback: str = "") -> str:
        """Get a display-friendly title (with fallback)."""
        return self.summary or fallback

    def get_meet_link(self) -> Optional[str]:
        """
        Get the video meeting link for this event.

        Returns:
            Meet URL if available, None otherwise
        """
        # Check hangoutLink first (older style)
        if self.hangout_link:
            return self.hangout_link

        # Check conferenceData (newer style)
        if self.conference_data:
            entry_points = self.conference_data.get("entryPoints", [])
            for entry in entry_points:
                if entry.get("entryPointType") == "video":
                    return entry.get("uri")

        return None


class CalendarInfo(BaseModel):
    """
    Information about a Google Calendar.

    Used to populate the calendar selection in the settings tab.
    """
    id: str = Field("", description="Calendar identifier (usually email)")
    summary: str = Field("", description="Calendar title")
    primary: bool = Field(False, description="Is this the primary calendar?")
    description: Optional[str] = Field(None)
    background_color: Optional[str] = Field(None, alias="backgroundColor")
    access_role: Optional[str] = Field(None, alias="accessRole")

    class Config:
        populate_by_name = True


class CalendarEventsResponse(BaseModel):
    """
    Response from the Calendar Events list API.

    Contains a list of events and pagination info.
    """
    kind: Optional[str] = Field(None)
    summary: Optional[str] = Field(None, description="Calendar title")
    time_zone: Optional[str] = Field(None, alias="timeZone")
    items: List[CalendarEvent] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(None, alias="nextPageToken")

    class Config:
        populate_by_name = True


class CalendarListResponse(BaseModel):
    """
    Response from the CalendarList API.

    Contains a list of calendars the user has access to.
    """
    kind: Optional[str] = Field(None)
    items: List[CalendarInfo] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(None, alias="nextPageToken")

    class Config:
        populate_by_name = True
