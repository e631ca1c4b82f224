"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Plugin settings with and without credentials
- Fake Google auth and calendar clients (no network)
- A CalendarService wired to the fakes
- Event factories
- Test client (FastAPI TestClient) over a plugin stored in tmp_path
"""

from datetime import date, datetime
from typing import Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from gcal_notes.deps import get_plugin
from gcal_notes.environments.base import OAuthTokens
from gcal_notes.environments.google.calendar.schemas import CalendarEvent, CalendarInfo
from gcal_notes.main import app
from gcal_notes.plugin import CalendarPlugin
from gcal_notes.schemas.settings import PluginSettings
from gcal_notes.services.calendar_service import CalendarService
from gcal_notes.services.notices import NoticeService


# ---------------------------------------------------------------------------
# FAKE GOOGLE CLIENTS
# ---------------------------------------------------------------------------

class FakeAuthClient:
    """Stands in for GoogleAuthClient; optionally raises on refresh."""

    def __init__(self):
        self.error: Optional[Exception] = None
        self.created_with: List[tuple] = []
        self.refresh_calls: List[str] = []

    async def refresh_access_token(self, refresh_token: str) -> OAuthTokens:
        self.refresh_calls.append(refresh_token)
        if self.error:
            raise self.error
        return OAuthTokens(access_token="ya29.test-token", refresh_token=refresh_token)


class FakeCalendarClient:
    """Stands in for GoogleCalendarClient; serves canned calendars and events."""

    def __init__(self):
        self.calendars: List[CalendarInfo] = []
        self.events: Dict[str, List[CalendarEvent]] = {}
        self.error: Optional[Exception] = None
        self.access_tokens: List[str] = []
        self.list_calendars_calls = 0
        self.list_events_calls: List[tuple] = []

    async def list_calendars(self) -> List[CalendarInfo]:
        self.list_calendars_calls += 1
        if self.error:
            raise self.error
        return list(self.calendars)

    async def list_events(self, calendar_id, time_min, time_max, **kwargs) -> List[CalendarEvent]:
        self.list_events_calls.append((calendar_id, time_min, time_max))
        if self.error:
            raise self.error
        return list(self.events.get(calendar_id, []))


# ---------------------------------------------------------------------------
# SETTINGS FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def plugin_settings() -> PluginSettings:
    """Settings with all three credentials and no extra calendars."""
    return PluginSettings(
        client_id="1234.apps.googleusercontent.com",
        client_secret="GOCSPX-secret",
        refresh_token="1//0e-refresh",
    )


@pytest.fixture
def empty_settings() -> PluginSettings:
    return PluginSettings()


# ---------------------------------------------------------------------------
# SERVICE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def notices() -> NoticeService:
    """A private notice service with a long duration so nothing expires mid-test."""
    return NoticeService(duration_seconds=60)


@pytest.fixture
def fake_auth() -> FakeAuthClient:
    return FakeAuthClient()


@pytest.fixture
def fake_calendar() -> FakeCalendarClient:
    return FakeCalendarClient()


@pytest.fixture
def calendar_service(notices, fake_auth, fake_calendar) -> CalendarService:
    """CalendarService whose Google clients are the fakes above."""

    def auth_factory(client_id, client_secret):
        fake_auth.created_with.append((client_id, client_secret))
        return fake_auth

    def calendar_factory(access_token):
        fake_calendar.access_tokens.append(access_token)
        return fake_calendar

    return CalendarService(
        notices=notices,
        auth_client_factory=auth_factory,
        calendar_client_factory=calendar_factory,
    )


# ---------------------------------------------------------------------------
# EVENT FACTORIES
# ---------------------------------------------------------------------------

def local_iso(day: date, hour: int, minute: int = 0) -> str:
    """RFC3339 string for a wall-clock time in the local zone."""
    return datetime(day.year, day.month, day.day, hour, minute).astimezone().isoformat()


@pytest.fixture
def timed_event():
    """Factory: timed event from local wall-clock hours."""

    def _make(summary, day, start, end, **extra) -> CalendarEvent:
        start_hour, start_minute = start
        end_hour, end_minute = end
        return CalendarEvent(
            summary=summary,
            start={"dateTime": local_iso(day, start_hour, start_minute)},
            end={"dateTime": local_iso(day, end_hour, end_minute)},
            **extra,
        )

    return _make


@pytest.fixture
def all_day_event():
    """Factory: all-day event on a date."""

    def _make(summary, day, **extra) -> CalendarEvent:
        return CalendarEvent(
            summary=summary,
            start={"date": day.isoformat()},
            end={"date": day.isoformat()},
            **extra,
        )

    return _make


# ---------------------------------------------------------------------------
# APP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def plugin(tmp_path, notices, calendar_service) -> CalendarPlugin:
    """Plugin persisted under tmp_path, talking to the fake clients."""
    plugin = CalendarPlugin(
        data_file=tmp_path / "data.json",
        notices=notices,
        calendar_service=calendar_service,
    )
    plugin.load()
    return plugin


@pytest.fixture
def client(plugin) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the test plugin.

    Overrides the get_plugin dependency; the lifespan is not run.
    """
    app.dependency_overrides[get_plugin] = lambda: plugin
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
