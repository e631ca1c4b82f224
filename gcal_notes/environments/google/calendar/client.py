"""
Google Calendar API Client - Fetch calendar events and the calendar list.

This client provides the two read calls the plugin needs. It handles API
requests, error handling, pagination and response parsing.

Key Features:
=============
1. List the events of one calendar inside a time window
2. List the calendars the user has access to
3. Clean error handling (every failure becomes RemoteFetchError)

API Reference:
==============
- Events API: https://developers.google.com/calendar/api/v3/reference/events
- CalendarList API: https://developers.google.com/calendar/api/v3/reference/calendarList

Usage Example:
==============
    from gcal_notes.environments.google.calendar import GoogleCalendarClient

    client = GoogleCalendarClient(access_token="ya29.xxx")

    events = await client.list_events_for_day(date(2025, 1, 15))
    for event in events:
        print(event.sort_key(), event.get_display_title())
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from gcal_notes.core.config import settings
from gcal_notes.environments.base import RemoteFetchError
from gcal_notes.environments.google.calendar.schemas import (
    CalendarEvent,
    CalendarInfo,
    CalendarEventsResponse,
    CalendarListResponse,
)
from gcal_notes.environments.google.calendar.window import day_window


logger = logging.getLogger("gcal.environments.google.calendar")

PageT = TypeVar("PageT", bound=BaseModel)


class GoogleCalendarClient:
    """
    Google Calendar API client.

    Requires a valid access token with the calendar.readonly scope.

    Attributes:
        access_token: Google OAuth access token with calendar scope

    Example:
        client = GoogleCalendarClient(access_token="ya29.xxx")
        calendars = await client.list_calendars()
    """

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Calendar client.

        Args:
            access_token: Valid Google OAuth access token with calendar scope
            base_url: API base URL override (defaults to settings)
            transport: Optional httpx transport (used by tests)
        """
        self.access_token = access_token
        self.base_url = (base_url or settings.GOOGLE_CALENDAR_API_URL).rstrip("/")
        self._transport = transport

    # -------------------------------------------------------------------------
    # HTTP CLIENT MANAGEMENT
    # -------------------------------------------------------------------------

    def _get_headers(self) -> dict:
        """Get authorization headers for API requests."""
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict:
        """
        Make an authenticated request to the Calendar API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path (e.g., "/calendars/primary/events")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            RemoteFetchError: If the request fails
        """
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._get_headers(),
                    params=params,
                    timeout=settings.HTTP_TIMEOUT_SECONDS,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error in Calendar API: {e}")
                raise RemoteFetchError(f"Network error: {e}")

        if response.status_code == 401:
            logger.error("Calendar API: Unauthorized (access token rejected)")
            raise RemoteFetchError(
                "Unauthorized - access token was rejected",
                status_code=401,
                response=response.text,
            )

        if response.status_code == 403:
            logger.error("Calendar API: Forbidden (scope may be missing)")
            raise RemoteFetchError(
                "Forbidden - calendar scope may not be granted",
                status_code=403,
                response=response.text,
            )

        if response.status_code != 200:
            error_detail = _error_message(response)
            logger.error(f"Calendar API error: {response.status_code} - {error_detail}")
            raise RemoteFetchError(
                f"API request failed: {error_detail}",
                status_code=response.status_code,
                response=response.text,
            )

        try:
            return response.json()
        except ValueError:
            logger.error(f"Calendar API returned a non-JSON body for {endpoint}")
            raise RemoteFetchError(
                "API request failed: unreadable response",
                status_code=response.status_code,
                response=response.text,
            )

    # -------------------------------------------------------------------------
    # CALENDAR EVENTS
    # -------------------------------------------------------------------------

    async def list_events(
        self,
        calendar_id: str,
        time_min: datetime,
        time_max: datetime,
        single_events: bool = True,
        order_by: str = "startTime",
    ) -> List[CalendarEvent]:
        """
        List the events of a calendar whose time falls inside a window.

        Follows nextPageToken until every page has been read.

        Args:
            calendar_id: Calendar identifier ("primary" for user's main calendar)
            time_min: Start of time range (inclusive)
            time_max: End of time range (exclusive)
            single_events: Expand recurring events into individual instances
            order_by: Server-side sort order ("startTime" or "updated")

        Returns:
            List of CalendarEvent objects in the order the API returned them
        """
        params = {
            "timeMin": time_min.isoformat(),
            "timeMax": time_max.isoformat(),
            "singleEvents": str(single_events).lower(),
            "orderBy": order_by,
        }

        logger.info(
            "Fetching calendar events",
            extra={
                "calendar_id": calendar_id,
                "time_min": params["timeMin"],
                "time_max": params["timeMax"],
            }
        )

        endpoint = f"/calendars/{quote(calendar_id, safe='')}/events"
        events: List[CalendarEvent] = []
        while True:
            response_data = await self._make_request(
                method="GET",
                endpoint=endpoint,
                params=params,
            )
            page = _parse_page(CalendarEventsResponse, response_data)
            events.extend(page.items)
            if not page.next_page_token:
                break
            params["pageToken"] = page.next_page_token

        logger.info(f"Fetched {len(events)} events from calendar {calendar_id}")

        return events

    async def list_events_for_day(
        self,
        day: Optional[date] = None,
        calendar_id: str = "primary",
    ) -> List[CalendarEvent]:
        """
        List events for one local day, midnight to midnight.

        Args:
            day: The date (defaults to today)
            calendar_id: Calendar identifier

        Returns:
            List of CalendarEvent objects for that day
        """
        time_min, time_max = day_window(day)
        return await self.list_events(
            calendar_id=calendar_id,
            time_min=time_min,
            time_max=time_max,
        )

    # -------------------------------------------------------------------------
    # CALENDAR LIST
    # -------------------------------------------------------------------------

    async def list_calendars(self) -> List[CalendarInfo]:
        """
        List calendars the user has access to.

        Returns:
            List of CalendarInfo objects
        """
        logger.info("Fetching calendar list")

        params: dict = {}
        calendars: List[CalendarInfo] = []
        while True:
            response_data = await self._make_request(
                method="GET",
                endpoint="/users/me/calendarList",
                params=params,
            )
            page = _parse_page(CalendarListResponse, response_data)
            calendars.extend(page.items)
            if not page.next_page_token:
                break
            params["pageToken"] = page.next_page_token

        logger.info(f"Found {len(calendars)} calendars")

        return calendars


def _error_message(response: httpx.Response) -> str:
    """Pull error.message out of a Google error body, else the raw text."""
    try:
        payload = response.json()
    except ValueError:
        return response.text
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"].get("message") or response.text
    return response.text


def _parse_page(model: Type[PageT], data) -> PageT:
    """Validate one list page; a malformed body is a RemoteFetchError."""
    try:
        return model(**data)
    except (TypeError, ValidationError) as e:
        logger.error(f"Calendar API returned an unexpected body: {e}")
        raise RemoteFetchError("API request failed: unexpected response", status_code=200)
