"""
Google Calendar Module - Calendar API Integration

Fetches a day's events and the calendar list, and renders the day view
panel as HTML.
"""

from gcal_notes.environments.google.calendar.client import GoogleCalendarClient
from gcal_notes.environments.google.calendar.schemas import (
    CalendarEvent,
    CalendarInfo,
    EventTime,
)
from gcal_notes.environments.google.calendar.renderer import CalendarRenderer
from gcal_notes.environments.google.calendar.window import day_window, local_day

__all__ = [
    "GoogleCalendarClient",
    "CalendarEvent",
    "CalendarInfo",
    "EventTime",
    "CalendarRenderer",
    "day_window",
    "local_day",
]
