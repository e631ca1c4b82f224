"""
Day view schemas - what the day view panel shows at a given moment.

A DayViewSnapshot is produced by DayViewController and consumed by the
HTML renderer and the JSON state endpoint.
"""

import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ViewState(str, Enum):
    """Observable states of the day view."""
    IDLE = "idle"          # opened, not rendered yet
    LOADING = "loading"    # aggregation in flight, navigation disabled
    LOADED = "loaded"      # table populated
    EMPTY = "empty"        # fetch succeeded with zero events
    ERROR = "error"        # fetch failed


class DayViewRow(BaseModel):
    """
    One table row.

    Example:
    {
        "time_text": "09:30",
        "duration_text": "1h 30m",
        "time_cell": "09:30 (1h 30m)",
        "title": "Planning",
        "meet_link": "https://meet.google.com/abc-defg-hij",
        "calendar_source": "Team"
    }
    """
    time_text: str
    duration_text: str = ""
    time_cell: str
    title: str = ""
    meet_link: Optional[str] = None
    # Only set when the event did not come from the primary calendar
    calendar_source: Optional[str] = None


class DayViewSnapshot(BaseModel):
    """Full state of the day view panel."""
    date: datetime.date
    title: str = Field(..., description="Header text, e.g. 'Mon Jan 15 2024'")
    state: ViewState
    navigation_disabled: bool = False
    rows: List[DayViewRow] = Field(default_factory=list)
    message: Optional[str] = None
