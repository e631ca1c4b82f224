"""
Dependencies module - reusable FastAPI dependencies for route handlers.
The main dependency here is get_plugin, which hands routes the running
CalendarPlugin.
"""

from fastapi import HTTPException, Request, status  # FastAPI components

from gcal_notes.plugin import CalendarPlugin


def get_plugin(request: Request) -> CalendarPlugin:
    """
    Return the plugin created by the app lifespan.

    Raises:
        503 Service Unavailable: If the app has not finished starting
    """
    plugin = getattr(request.app.state, "plugin", None)
    if plugin is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Plugin not loaded",
        )
    return plugin
