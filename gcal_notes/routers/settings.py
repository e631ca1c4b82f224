"""
Settings Router - the plugin settings tab.

Endpoints:
==========
- GET   /settings                          → Current settings (secrets masked)
- PATCH /settings                          → Update credentials
- POST  /settings/calendars/discover       → Load the user's calendars
- PUT   /settings/calendars/{calendar_id}  → Enable/disable one calendar

Invalid input (an empty client id or secret) is not an HTTP error: the
tab shows a notice and keeps the stored value, exactly like typing into
the field would.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from gcal_notes.deps import get_plugin
from gcal_notes.plugin import CalendarPlugin
from gcal_notes.schemas.settings import (
    CalendarOption,
    CalendarToggle,
    SettingsUpdate,
    SettingsView,
)


logger = logging.getLogger("gcal.routers.settings")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/settings", tags=["settings"])


# ---------------------------------------------------------------------------
# CREDENTIALS
# ---------------------------------------------------------------------------

@router.get("", response_model=SettingsView)
async def get_settings(plugin: CalendarPlugin = Depends(get_plugin)):
    return SettingsView.from_settings(plugin.settings)


@router.patch("", response_model=SettingsView)
async def update_settings(
    update: SettingsUpdate,
    plugin: CalendarPlugin = Depends(get_plugin),
):
    """Apply each provided field the way the settings tab would."""
    if update.client_id is not None:
        await plugin.update_client_id(update.client_id)
    if update.client_secret is not None:
        await plugin.update_client_secret(update.client_secret)
    if update.refresh_token is not None:
        await plugin.update_refresh_token(update.refresh_token)
    return SettingsView.from_settings(plugin.settings)


# ---------------------------------------------------------------------------
# CALENDAR SELECTION
# ---------------------------------------------------------------------------

@router.post("/calendars/discover", response_model=List[CalendarOption])
async def discover_calendars(plugin: CalendarPlugin = Depends(get_plugin)):
    """
    Discover the user's non-primary calendars.

    A failure has already shown a notice and returns an empty list.
    """
    return await plugin.discover_calendars()


@router.put("/calendars/{calendar_id:path}", response_model=SettingsView)
async def set_calendar_enabled(
    calendar_id: str,
    toggle: CalendarToggle,
    plugin: CalendarPlugin = Depends(get_plugin),
):
    await plugin.set_calendar_enabled(calendar_id, toggle.enabled)
    return SettingsView.from_settings(plugin.settings)
