"""
Calendar HTML Renderer - the day view side panel.

Turns a DayViewSnapshot into a self-contained HTML fragment page:

    ┌───────────────────────────────────┐
    │ <  Mon Jan 15 2024  Today 🔄  >  │   header controls
    ├───────────────────────────────────┤
    │ 09:00 (30m) │ Standup 🎥         │   one row per event
    │ All-day     │ Offsite • Team     │
    └───────────────────────────────────┘

Design Goals:
=============
1. No JavaScript; controls are plain forms posting to the view endpoints
2. Controls rendered disabled while a fetch is in flight
3. Dark and light themes, matching the host
4. Every piece of event text is HTML-escaped

Usage:
======
    from gcal_notes.environments.google.calendar import CalendarRenderer

    renderer = CalendarRenderer(theme="light")
    html = renderer.render_panel(controller.snapshot())
"""

import html as html_escape
from typing import List
from urllib.parse import quote

from gcal_notes.schemas.day_view import DayViewRow, DayViewSnapshot, ViewState


# (label, action path suffix, tooltip)
_CONTROLS = [
    ("<", "previous", "Previous day"),
    ("Today", "today", "Go to today"),
    ("🔄", "refresh", "Refresh"),
    (">", "next", "Next day"),
]


class CalendarRenderer:
    """
    Renders the day view panel as HTML.

    Attributes:
        theme: Color theme ("dark" or "light")
        font_size: Base font size in pixels
        action_prefix: URL prefix the header controls post to
    """

    def __init__(
        self,
        theme: str = "dark",
        font_size: int = 14,
        action_prefix: str = "/views/calendar",
    ):
        self.theme = theme
        self.font_size = font_size
        self.action_prefix = action_prefix.rstrip("/")

    def _get_css(self) -> str:
        """Generate CSS styles based on theme and settings."""

        if self.theme == "dark":
            bg_color = "#1e1e1e"
            text_color = "#dcddde"
            accent_color = "#7f6df2"
            muted_color = "#999999"
            border_color = "#333333"
            error_color = "#ef5350"
        else:
            bg_color = "#ffffff"
            text_color = "#2e3338"
            accent_color = "#705dcf"
            muted_color = "#888888"
            border_color = "#e0e0e0"
            error_color = "#d32f2f"

        return f"""
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto,
                         Oxygen, Ubuntu, Cantarell, sans-serif;
            font-size: {self.font_size}px;
            line-height: 1.5;
            background-color: {bg_color};
            color: {text_color};
            padding: 0.75rem;
        }}

        .calendar-header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            gap: 0.25rem;
            margin-bottom: 0.75rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid {border_color};
        }}

        .calendar-header h4 {{
            flex: 1;
            text-align: center;
            font-weight: 600;
        }}

        .calendar-header form {{
            display: inline;
        }}

        .calendar-header button {{
            background: none;
            border: 1px solid {border_color};
            border-radius: 4px;
            color: {text_color};
            padding: 0.1rem 0.5rem;
            cursor: pointer;
        }}

        .calendar-header button:disabled {{
            opacity: 0.4;
            cursor: default;
        }}

        .loading {{
            text-align: center;
            color: {muted_color};
            padding: 1rem;
        }}

        table.events {{
            width: 100%;
            border-collapse: collapse;
        }}

        table.events td {{
            padding: 0.3rem 0.25rem;
            border-bottom: 1px solid {border_color};
            vertical-align: top;
        }}

        td.event-time {{
            white-space: nowrap;
            color: {accent_color};
            width: 1%;
        }}

        a.meet-link {{
            text-decoration: none;
            margin-left: 0.25rem;
        }}

        .calendar-source {{
            color: {muted_color};
            font-size: 0.85em;
            margin-left: 0.25rem;
        }}

        p.message {{
            text-align: center;
            color: {muted_color};
            padding: 1rem;
        }}

        p.message.error {{
            color: {error_color};
        }}
        """

    def _render_controls(self, snapshot: DayViewSnapshot) -> List[str]:
        disabled = " disabled" if snapshot.navigation_disabled else ""
        theme = html_escape.escape(quote(self.theme, safe=""))
        controls = []
        for label, action, tooltip in _CONTROLS:
            controls.append(
                f'<form method="post" action="{self.action_prefix}/{action}?theme={theme}">'
                f'<button type="submit" title="{tooltip}"{disabled}>{label}</button>'
                f"</form>"
            )
        return controls

    def _render_header(self, snapshot: DayViewSnapshot) -> str:
        previous_btn, today_btn, refresh_btn, next_btn = self._render_controls(snapshot)
        title = html_escape.escape(snapshot.title)
        return f"""
        <div class="calendar-header">
            {previous_btn}
            <h4>{title}</h4>
            {today_btn}
            {refresh_btn}
            {next_btn}
        </div>
        """

    def _render_row(self, row: DayViewRow) -> str:
        """Render a single event row."""
        time_cell = html_escape.escape(row.time_cell)
        title = html_escape.escape(row.title)

        meet_html = ""
        if row.meet_link:
            href = html_escape.escape(row.meet_link, quote=True)
            meet_html = (
                f'<a class="meet-link" href="{href}" target="_blank" '
                f'rel="noopener" title="Join Meeting">🎥</a>'
            )

        source_html = ""
        if row.calendar_source:
            source = html_escape.escape(row.calendar_source)
            source_html = f'<span class="calendar-source">• {source}</span>'

        return f"""
            <tr>
                <td class="event-time">{time_cell}</td>
                <td class="event-title">{title}{meet_html}{source_html}</td>
            </tr>"""

    def _render_body(self, snapshot: DayViewSnapshot) -> str:
        if snapshot.state == ViewState.LOADING:
            return f'<div class="loading">{html_escape.escape(snapshot.message or "")}</div>'

        if snapshot.state == ViewState.LOADED:
            rows_html = "".join(self._render_row(row) for row in snapshot.rows)
            return f'<table class="events"><tbody>{rows_html}\n        </tbody></table>'

        if snapshot.state == ViewState.ERROR:
            message = html_escape.escape(snapshot.message or "")
            return f'<p class="message error">{message}</p>'

        if snapshot.state == ViewState.EMPTY:
            return f'<p class="message">{html_escape.escape(snapshot.message or "")}</p>'

        # IDLE: opened but never rendered
        return ""

    def render_panel(self, snapshot: DayViewSnapshot) -> str:
        """
        Render the day view as a complete HTML page.

        Args:
            snapshot: Current DayViewController state

        Returns:
            Complete HTML page as a string
        """
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Google Calendar</title>
    <style>
    {self._get_css()}
    </style>
</head>
<body class="calendar-view" data-state="{snapshot.state.value}">
    {self._render_header(snapshot)}
    {self._render_body(snapshot)}
</body>
</html>
"""
