"""
Calendar Service - day event aggregation and calendar discovery.

This is the one place that talks to Google on behalf of the plugin.
Every call is a single sequential operation:

    credentials check → refresh-token exchange → calendar list
        → one events.list per selected calendar → tag → merge → sort

Failures never propagate. ConfigurationError, AuthenticationError and
RemoteFetchError are caught here, turned into a notice, and reported to the
caller as a FetchResult (aggregation) or an empty list (discovery). Nothing
is retried.

Usage:
    service = CalendarService(notices=plugin_notices)

    result = await service.fetch_day_events(plugin_settings)
    if result.ok:
        for event in result.events:
            ...
"""

import logging
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Union

from gcal_notes.environments.base import (
    AuthenticationError,
    ConfigurationError,
    RemoteFetchError,
)
from gcal_notes.environments.google.auth import GoogleAuthClient
from gcal_notes.environments.google.calendar.client import GoogleCalendarClient
from gcal_notes.environments.google.calendar.schemas import CalendarEvent, CalendarInfo
from gcal_notes.environments.google.calendar.window import day_window
from gcal_notes.schemas.settings import PluginSettings
from gcal_notes.services.fetch_result import FetchErrorKind, FetchResult
from gcal_notes.services.notices import NoticeService


logger = logging.getLogger("gcal.services.calendar")


# ---------------------------------------------------------------------------
# NOTICE TEXTS
# ---------------------------------------------------------------------------

MISSING_CREDENTIALS_NOTICE = "Google Calendar credentials not set."
INVALID_TOKEN_NOTICE = (
    "Invalid refresh token. Please check your credentials in the plugin settings."
)
EVENTS_ERROR_NOTICE = "Error fetching Google Calendar events: {message}"
CALENDARS_ERROR_NOTICE = "Error fetching calendars: {message}"


# ---------------------------------------------------------------------------
# MERGING
# ---------------------------------------------------------------------------

def event_sort_key(event: CalendarEvent) -> str:
    """start.dateTime, else start.date, else "" (ISO strings sort correctly)."""
    return event.sort_key()


def merge_events(batches: Iterable[List[CalendarEvent]]) -> List[CalendarEvent]:
    """
    Concatenate per-calendar event lists and sort by start.

    sorted() is stable, so events with equal keys keep the order of the
    calendars they came from.
    """
    merged: List[CalendarEvent] = []
    for batch in batches:
        merged.extend(batch)
    return sorted(merged, key=event_sort_key)


# ---------------------------------------------------------------------------
# SERVICE
# ---------------------------------------------------------------------------

class CalendarService:
    """
    Fetches and merges events from the user's selected calendars.

    The client factories exist so tests can substitute fakes; production
    code uses the defaults.
    """

    def __init__(
        self,
        notices: Optional[NoticeService] = None,
        auth_client_factory: Optional[Callable[[str, str], GoogleAuthClient]] = None,
        calendar_client_factory: Optional[Callable[[str], GoogleCalendarClient]] = None,
    ):
        self.notices = notices or NoticeService()
        self._auth_client_factory = auth_client_factory or GoogleAuthClient
        self._calendar_client_factory = calendar_client_factory or GoogleCalendarClient

    async def _open_calendar(self, settings: PluginSettings) -> GoogleCalendarClient:
        """
        Exchange the refresh token and return a ready Calendar client.

        Raises:
            ConfigurationError: Before any network call, if a credential is empty
            AuthenticationError: If the refresh token is rejected
            RemoteFetchError: For any other token endpoint failure
        """
        if not settings.has_credentials():
            raise ConfigurationError(MISSING_CREDENTIALS_NOTICE)

        auth_client = self._auth_client_factory(settings.client_id, settings.client_secret)
        tokens = await auth_client.refresh_access_token(settings.refresh_token)
        return self._calendar_client_factory(tokens.access_token)

    # -------------------------------------------------------------------------
    # EVENT AGGREGATION
    # -------------------------------------------------------------------------

    async def fetch_day_events(
        self,
        settings: PluginSettings,
        target_date: Optional[Union[date, datetime]] = None,
    ) -> FetchResult:
        """
        Fetch one local day of events from every selected calendar.

        Args:
            settings: Plugin settings (credentials + selected calendar ids)
            target_date: Day to fetch (defaults to today)

        Returns:
            FetchResult with the merged events, or the failure kind
        """
        try:
            events = await self._aggregate(settings, target_date)
        except ConfigurationError:
            self.notices.show(MISSING_CREDENTIALS_NOTICE, level="warning")
            return FetchResult.failure(FetchErrorKind.CONFIGURATION, MISSING_CREDENTIALS_NOTICE)
        except AuthenticationError as e:
            logger.warning(f"Refresh token rejected: {e}")
            self.notices.show(INVALID_TOKEN_NOTICE, level="error")
            return FetchResult.failure(FetchErrorKind.AUTHENTICATION, INVALID_TOKEN_NOTICE)
        except RemoteFetchError as e:
            message = EVENTS_ERROR_NOTICE.format(message=e)
            self.notices.show(message, level="error")
            return FetchResult.failure(FetchErrorKind.REMOTE, message)

        return FetchResult.success(events)

    async def _aggregate(
        self,
        settings: PluginSettings,
        target_date: Optional[Union[date, datetime]],
    ) -> List[CalendarEvent]:
        calendar = await self._open_calendar(settings)
        time_min, time_max = day_window(target_date)

        # One calendar list call per aggregation, for display names
        calendars = await calendar.list_calendars()
        names = {info.id: info.summary for info in calendars}

        batches: List[List[CalendarEvent]] = []
        for calendar_id in settings.effective_calendar_ids():
            events = await calendar.list_events(
                calendar_id=calendar_id,
                time_min=time_min,
                time_max=time_max,
            )
            calendar_name = names.get(calendar_id) or calendar_id
            batches.append(
                [event.model_copy(update={"calendar_name": calendar_name}) for event in events]
            )

        merged = merge_events(batches)
        logger.info(
            "Aggregated day events",
            extra={
                "day": time_min.date().isoformat(),
                "calendars": len(batches),
                "events": len(merged),
            },
        )
        return merged

    # -------------------------------------------------------------------------
    # CALENDAR DISCOVERY
    # -------------------------------------------------------------------------

    async def list_calendars(self, settings: PluginSettings) -> List[CalendarInfo]:
        """
        List the user's calendars for the settings tab.

        Soft-fails: every failure shows a notice and returns [].
        """
        try:
            calendar = await self._open_calendar(settings)
            calendars = await calendar.list_calendars()
        except ConfigurationError:
            self.notices.show(MISSING_CREDENTIALS_NOTICE, level="warning")
            return []
        except AuthenticationError as e:
            logger.warning(f"Refresh token rejected during discovery: {e}")
            self.notices.show(INVALID_TOKEN_NOTICE, level="error")
            return []
        except RemoteFetchError as e:
            self.notices.show(CALENDARS_ERROR_NOTICE.format(message=e), level="error")
            return []

        return [
            CalendarInfo(id=info.id, summary=info.summary, primary=info.primary)
            for info in calendars
        ]
