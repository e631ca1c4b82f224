"""
Views Router - the Google Calendar day view panel.

Endpoints:
==========
- POST   /views/calendar/open     → Open (or reopen) the view on today
- DELETE /views/calendar          → Close the view
- GET    /views/calendar          → Rendered HTML panel
- GET    /views/calendar/state    → Panel state as JSON
- POST   /views/calendar/previous → Previous day
- POST   /views/calendar/next     → Next day
- POST   /views/calendar/today    → Back to today
- POST   /views/calendar/refresh  → Re-fetch the current day

Navigation requests made while a fetch is in flight are answered with
accepted=false and change nothing.

The panel's header controls are plain HTML forms. A form post is answered
with 303 See Other back to the panel (keeping its query string, so the
theme survives); API clients get the JSON NavigationResponse.
"""

import logging
from typing import Awaitable, Callable, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from gcal_notes.deps import get_plugin
from gcal_notes.environments.google.calendar import CalendarRenderer
from gcal_notes.plugin import CalendarPlugin
from gcal_notes.schemas.day_view import DayViewSnapshot
from gcal_notes.services.day_view import DayViewController


logger = logging.getLogger("gcal.routers.views")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/views/calendar", tags=["views"])


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class NavigationResponse(BaseModel):
    """
    Result of a navigation request.

    Example response:
    {
        "accepted": false,
        "snapshot": {"date": "2024-01-15", "state": "loading", ...}
    }
    """
    accepted: bool
    snapshot: DayViewSnapshot


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------

def _require_view(plugin: CalendarPlugin) -> DayViewController:
    if plugin.view is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Calendar view is not open",
        )
    return plugin.view


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _is_form_post(request: Request) -> bool:
    content_type = request.headers.get("content-type", "").lower()
    return content_type.startswith(FORM_CONTENT_TYPES)


async def _navigate(
    request: Request,
    plugin: CalendarPlugin,
    action: Callable[[DayViewController], Awaitable[bool]],
) -> Union[NavigationResponse, RedirectResponse]:
    view = _require_view(plugin)
    accepted = await action(view)

    if _is_form_post(request):
        url = router.prefix
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)

    return NavigationResponse(accepted=accepted, snapshot=view.snapshot())


# ---------------------------------------------------------------------------
# VIEW LIFECYCLE
# ---------------------------------------------------------------------------

@router.post("/open", response_model=DayViewSnapshot)
async def open_view(plugin: CalendarPlugin = Depends(get_plugin)):
    """Detach any open view, open a fresh one on today and render it."""
    view = await plugin.activate_view()
    return view.snapshot()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def close_view(plugin: CalendarPlugin = Depends(get_plugin)):
    plugin.close_view()


# ---------------------------------------------------------------------------
# PANEL
# ---------------------------------------------------------------------------

@router.get("", response_class=HTMLResponse)
async def get_view_html(
    theme: str = Query(default="dark", description="Color theme: dark or light"),
    plugin: CalendarPlugin = Depends(get_plugin),
):
    """
    Render the day view panel.

    Returns the current state without fetching; use the navigation
    endpoints to load data.
    """
    view = _require_view(plugin)
    renderer = CalendarRenderer(theme=theme, action_prefix=router.prefix)
    return HTMLResponse(content=renderer.render_panel(view.snapshot()))


@router.get("/state", response_model=DayViewSnapshot)
async def get_view_state(plugin: CalendarPlugin = Depends(get_plugin)):
    return _require_view(plugin).snapshot()


# ---------------------------------------------------------------------------
# NAVIGATION
# ---------------------------------------------------------------------------

@router.post("/previous", response_model=NavigationResponse)
async def previous_day(request: Request, plugin: CalendarPlugin = Depends(get_plugin)):
    return await _navigate(request, plugin, lambda view: view.previous_day())


@router.post("/next", response_model=NavigationResponse)
async def next_day(request: Request, plugin: CalendarPlugin = Depends(get_plugin)):
    return await _navigate(request, plugin, lambda view: view.next_day())


@router.post("/today", response_model=NavigationResponse)
async def go_to_today(request: Request, plugin: CalendarPlugin = Depends(get_plugin)):
    return await _navigate(request, plugin, lambda view: view.go_to_today())


@router.post("/refresh", response_model=NavigationResponse)
async def refresh(request: Request, plugin: CalendarPlugin = Depends(get_plugin)):
    return await _navigate(request, plugin, lambda view: view.refresh())
