"""
Google Environment Module - Google Calendar integration.

Architecture:
=============
google/
├── __init__.py           # Module exports
├── auth/                 # Refresh-token exchange
│   ├── client.py
│   └── schemas.py
└── calendar/             # Google Calendar API
    ├── client.py         # Calendar API client
    ├── schemas.py        # Calendar data structures
    ├── window.py         # Local day window
    └── renderer.py       # HTML rendering of the day view panel

Usage:
======
    from gcal_notes.environments.google import GoogleAuthClient, GoogleCalendarClient

    auth_client = GoogleAuthClient(client_id, client_secret)
    tokens = await auth_client.refresh_access_token(refresh_token)

    calendar = GoogleCalendarClient(access_token=tokens.access_token)
    calendars = await calendar.list_calendars()
"""

from gcal_notes.environments.google.auth import GoogleAuthClient
from gcal_notes.environments.google.calendar import (
    GoogleCalendarClient,
    CalendarEvent,
    CalendarInfo,
)

__all__ = [
    "GoogleAuthClient",
    "GoogleCalendarClient",
    "CalendarEvent",
    "CalendarInfo",
]
