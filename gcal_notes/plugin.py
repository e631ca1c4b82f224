"""
Calendar Plugin - lifecycle owner for the Google Calendar integration.

One CalendarPlugin exists per running host. It owns:
- the persisted settings record (through SettingsStore)
- the notice service and the calendar service
- at most one open day view
- the settings tab state (the last discovered calendar list)

The routers are thin adapters over this object.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from gcal_notes.environments.google.calendar.schemas import CalendarInfo
from gcal_notes.schemas.settings import SECRET_PLACEHOLDER, CalendarOption, PluginSettings
from gcal_notes.services.calendar_service import CalendarService
from gcal_notes.services.day_view import DayViewController
from gcal_notes.services.event_formatting import build_insert_text
from gcal_notes.services.notices import NoticeService
from gcal_notes.services.settings_store import SettingsStore


logger = logging.getLogger("gcal.plugin")


CLIENT_ID_EMPTY_NOTICE = "Client ID cannot be empty"
CLIENT_SECRET_EMPTY_NOTICE = "Client Secret cannot be empty"


@dataclass(frozen=True)
class Command:
    """A command exposed to the host's command palette."""
    id: str
    name: str


OPEN_VIEW_COMMAND = Command(id="gcal:open-view", name="Open Google Calendar view")
INSERT_EVENTS_COMMAND = Command(id="gcal:insert-events", name="Insert today's events")

COMMANDS: Dict[str, Command] = {
    OPEN_VIEW_COMMAND.id: OPEN_VIEW_COMMAND,
    INSERT_EVENTS_COMMAND.id: INSERT_EVENTS_COMMAND,
}


class CalendarPlugin:
    """
    The plugin as seen by the host.

    Args:
        data_file: Where the settings record is persisted
        notices: Notice service (a fresh one per plugin by default)
        calendar_service: Calendar service (built on the notice service by default)
    """

    def __init__(
        self,
        data_file: Union[str, Path],
        notices: Optional[NoticeService] = None,
        calendar_service: Optional[CalendarService] = None,
    ):
        self.store = SettingsStore(data_file)
        self.notices = notices or NoticeService()
        self.calendar_service = calendar_service or CalendarService(notices=self.notices)
        self.settings = PluginSettings()
        self.view: Optional[DayViewController] = None
        self.available_calendars: List[CalendarInfo] = []

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def load(self) -> PluginSettings:
        """Load the persisted settings (defaults for anything missing)."""
        self.settings = self.store.load()
        return self.settings

    async def save_settings(self) -> None:
        """Persist the settings and push them into the open view."""
        self.store.save(self.settings)
        if self.view is not None:
            await self.view.update_settings(self.settings)

    async def activate_view(self) -> DayViewController:
        """
        Open the day view.

        Any existing view is detached first, so there is never more than
        one. The new view starts on today and renders immediately.
        """
        self.close_view()
        self.view = DayViewController(self.settings, self.calendar_service)
        logger.info("Opened calendar view")
        await self.view.render()
        return self.view

    def close_view(self) -> None:
        if self.view is not None:
            logger.info("Closed calendar view")
        self.view = None

    # -------------------------------------------------------------------------
    # COMMANDS
    # -------------------------------------------------------------------------

    async def insert_events(self) -> str:
        """
        Text for the "Insert today's events" command.

        A failed fetch has already shown its notice and inserts the
        fallback line.
        """
        result = await self.calendar_service.fetch_day_events(self.settings)
        return build_insert_text(result.events)

    # -------------------------------------------------------------------------
    # SETTINGS TAB
    # -------------------------------------------------------------------------

    async def update_client_id(self, value: str) -> bool:
        """Set the client id. Empty input shows a notice and saves nothing."""
        value = value.strip()
        if not value:
            self.notices.show(CLIENT_ID_EMPTY_NOTICE, level="warning")
            return False
        self.settings.client_id = value
        await self.save_settings()
        return True

    async def update_client_secret(self, value: str) -> bool:
        """
        Set the client secret.

        The masked placeholder means "unchanged" and is ignored. Empty input
        shows a notice and saves nothing.
        """
        if value == SECRET_PLACEHOLDER:
            return False
        value = value.strip()
        if not value:
            self.notices.show(CLIENT_SECRET_EMPTY_NOTICE, level="warning")
            return False
        self.settings.client_secret = value
        await self.save_settings()
        return True

    async def update_refresh_token(self, value: str) -> bool:
        """Set the refresh token as typed. The masked placeholder is ignored."""
        if value == SECRET_PLACEHOLDER:
            return False
        self.settings.refresh_token = value
        await self.save_settings()
        return True

    async def discover_calendars(self) -> List[CalendarOption]:
        """
        Load the user's calendars for the toggles.

        Only non-primary calendars get a toggle; the primary calendar is
        always implied when nothing is selected.
        """
        self.available_calendars = await self.calendar_service.list_calendars(self.settings)
        return self.calendar_options()

    def calendar_options(self) -> List[CalendarOption]:
        return [
            CalendarOption(
                id=info.id,
                summary=info.summary,
                enabled=info.id in self.settings.calendar_ids,
            )
            for info in self.available_calendars
            if not info.primary
        ]

    async def set_calendar_enabled(self, calendar_id: str, enabled: bool) -> List[str]:
        """Add (once) or remove a calendar from the selection, then save."""
        if enabled:
            if calendar_id not in self.settings.calendar_ids:
                self.settings.calendar_ids.append(calendar_id)
        else:
            self.settings.calendar_ids = [
                cid for cid in self.settings.calendar_ids if cid != calendar_id
            ]
        await self.save_settings()
        return list(self.settings.calendar_ids)
