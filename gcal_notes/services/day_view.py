"""
Day View Controller - state behind the calendar side panel.

The panel shows one day at a time. Its state is a date cursor plus the
outcome of the last fetch:

    IDLE ──render()──▶ LOADING ──▶ LOADED | EMPTY | ERROR
                          ▲                    │
                          └──── navigation ────┘

Concurrency:
============
Everything runs on the host's event loop. While a fetch is in flight
is_loading is True, navigation is reported as disabled, and every
navigation or refresh request is ignored (returns False). Nothing is queued
and nothing is cancelled. A settings push during a fetch is the one
exception: it triggers a single re-render once that fetch completes.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional

from gcal_notes.environments.google.calendar.window import local_day
from gcal_notes.schemas.day_view import DayViewRow, DayViewSnapshot, ViewState
from gcal_notes.schemas.settings import PluginSettings
from gcal_notes.services.calendar_service import CalendarService
from gcal_notes.services.event_formatting import build_rows, format_date_heading


logger = logging.getLogger("gcal.services.day_view")


EMPTY_MESSAGE = "Nothing today!"
ERROR_MESSAGE = "Error loading calendar events"
LOADING_MESSAGE = "Loading..."


class DayViewController:
    """
    One open day view.

    Attributes:
        settings: Plugin settings, pushed in by the owner on change
        current_date: Day being shown
        is_loading: Busy flag; True while a fetch is in flight
        state: Current ViewState
        rows: Table rows of the last successful fetch
        message: Single-line message for the EMPTY/ERROR states
    """

    view_type = "calendar-view"
    display_text = "Google Calendar"
    icon = "calendar"

    def __init__(
        self,
        settings: PluginSettings,
        calendar_service: CalendarService,
        current_date: Optional[date] = None,
    ):
        self.settings = settings
        self.calendar_service = calendar_service
        self.current_date: date = current_date or local_day()
        self.is_loading = False
        self.state = ViewState.IDLE
        self.rows: List[DayViewRow] = []
        self.message: Optional[str] = None
        # Settings changed while a fetch was in flight
        self._stale = False

    # -------------------------------------------------------------------------
    # RENDERING
    # -------------------------------------------------------------------------

    async def render(self) -> DayViewSnapshot:
        """
        Fetch the current day and update the view state.

        Every render starts in LOADING and performs exactly one aggregation.
        """
        self._set_loading(True)
        self._stale = False
        self.rows = []
        self.message = None

        try:
            result = await self.calendar_service.fetch_day_events(self.settings, self.current_date)
            if not result.ok:
                self.state = ViewState.ERROR
                self.message = ERROR_MESSAGE
            elif result.is_empty:
                self.state = ViewState.EMPTY
                self.message = EMPTY_MESSAGE
            else:
                self.rows = build_rows(result.events)
                self.state = ViewState.LOADED
        finally:
            self._set_loading(False)

        logger.info(
            f"Rendered {self.current_date.isoformat()}",
            extra={"state": self.state.value, "rows": len(self.rows)},
        )

        if self._stale:
            return await self.render()
        return self.snapshot()

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        if loading:
            self.state = ViewState.LOADING

    def snapshot(self) -> DayViewSnapshot:
        """Current state, ready for the renderer."""
        return DayViewSnapshot(
            date=self.current_date,
            title=format_date_heading(self.current_date),
            state=self.state,
            navigation_disabled=self.is_loading,
            rows=list(self.rows),
            message=LOADING_MESSAGE if self.is_loading else self.message,
        )

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    async def previous_day(self) -> bool:
        """Step back one day. Ignored while loading."""
        return await self._navigate(self.current_date - timedelta(days=1))

    async def next_day(self) -> bool:
        """Step forward one day. Ignored while loading."""
        return await self._navigate(self.current_date + timedelta(days=1))

    async def go_to_today(self) -> bool:
        """Jump back to today. Ignored while loading."""
        return await self._navigate(local_day())

    async def refresh(self) -> bool:
        """Re-fetch the current day. Ignored while loading."""
        return await self._navigate(self.current_date)

    async def _navigate(self, target: date) -> bool:
        if self.is_loading:
            logger.debug("Navigation ignored, fetch in flight")
            return False
        self.current_date = target
        await self.render()
        return True

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    async def update_settings(self, settings: PluginSettings) -> DayViewSnapshot:
        """
        Take the new settings and re-render.

        During a fetch the re-render waits for that fetch to finish.
        """
        self.settings = settings
        if self.is_loading:
            self._stale = True
            return self.snapshot()
        return await self.render()
