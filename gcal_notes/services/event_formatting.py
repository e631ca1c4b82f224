"""
Event Formatting - turns merged events into text and table rows.

Two consumers:
- the "Insert today's events" command (build_insert_text)
- the day view panel (build_rows)

All functions are pure; the same events always give the same output.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional

from gcal_notes.environments.google.calendar.schemas import CalendarEvent
from gcal_notes.environments.google.calendar.window import local_day
from gcal_notes.schemas.day_view import DayViewRow


ALL_DAY = "All-day"
NO_EVENTS_TEXT = "No events today.\n"
UNTITLED = "Untitled"
PRIMARY_CALENDAR = "primary"

_HOUR_MS = 60 * 60 * 1000
_MINUTE_MS = 60 * 1000


def format_date_heading(day: date) -> str:
    """Short date, e.g. 'Mon Jan 15 2024'."""
    return day.strftime("%a %b %d %Y")


def format_clock(value: datetime) -> str:
    """Two-digit hour and minute in local time, e.g. '09:30'."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%H:%M")


def format_duration(start: datetime, end: datetime) -> str:
    """
    '{h}h {m}m' when the event lasts an hour or more, else '{m}m'.

    Whole hours and leftover whole minutes, both floored.
    """
    duration_ms = (end - start) // timedelta(milliseconds=1)
    hours = duration_ms // _HOUR_MS
    minutes = (duration_ms % _HOUR_MS) // _MINUTE_MS
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_time_range(event: CalendarEvent) -> str:
    """'HH:MM-HH:MM' for timed events, 'All-day' otherwise."""
    if not event.is_timed():
        return ALL_DAY
    start = format_clock(event.start.get_datetime())
    end = format_clock(event.end.get_datetime())
    return f"{start}-{end}"


# ---------------------------------------------------------------------------
# TEXT INSERTION
# ---------------------------------------------------------------------------

def build_insert_text(
    events: Optional[List[CalendarEvent]],
    today: Optional[date] = None,
) -> str:
    """
    Markdown block for the "Insert today's events" command.

    Example:
        ## Mon Jan 15 2024 Events

        - **09:00-09:30**: Standup [Join Meeting](https://meet.google.com/x)
        - **All-day**: Offsite

    Events without a start are skipped. No events (or a failed fetch)
    gives the single fallback line.
    """
    if not events:
        return NO_EVENTS_TEXT

    lines = [f"## {format_date_heading(local_day(today))} Events", ""]
    for event in events:
        if not event.start:
            continue
        line = f"- **{format_time_range(event)}**: {event.get_display_title(UNTITLED)}"
        meet_link = event.get_meet_link()
        if meet_link:
            line += f" [Join Meeting]({meet_link})"
        lines.append(line)

    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# DAY VIEW ROWS
# ---------------------------------------------------------------------------

def build_row(event: CalendarEvent) -> DayViewRow:
    """Table row for one event that has a start."""
    if event.is_timed():
        start = event.start.get_datetime()
        time_text = format_clock(start)
        duration_text = format_duration(start, event.end.get_datetime())
    else:
        time_text = ALL_DAY
        duration_text = ""

    time_cell = f"{time_text} ({duration_text})" if duration_text else time_text

    calendar_source = None
    if event.calendar_name and event.calendar_name != PRIMARY_CALENDAR:
        calendar_source = event.calendar_name

    return DayViewRow(
        time_text=time_text,
        duration_text=duration_text,
        time_cell=time_cell,
        title=event.get_display_title(),
        meet_link=event.get_meet_link(),
        calendar_source=calendar_source,
    )


def build_rows(events: List[CalendarEvent]) -> List[DayViewRow]:
    """Rows for every event that has a start, in order."""
    return [build_row(event) for event in events if event.start]
