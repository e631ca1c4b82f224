"""
Tests for the day view HTML renderer.
"""

from datetime import date

from gcal_notes.environments.google.calendar import CalendarRenderer
from gcal_notes.schemas.day_view import DayViewRow, DayViewSnapshot, ViewState


DAY = date(2024, 1, 15)


def _snapshot(**overrides) -> DayViewSnapshot:
    values = {"date": DAY, "title": "Mon Jan 15 2024", "state": ViewState.LOADED}
    values.update(overrides)
    return DayViewSnapshot(**values)


class TestRenderPanel:
    """Tests for CalendarRenderer.render_panel."""

    def test_header_and_controls(self):
        html = CalendarRenderer().render_panel(_snapshot())

        assert "<h4>Mon Jan 15 2024</h4>" in html
        for action in ("previous", "today", "refresh", "next"):
            assert f'action="/views/calendar/{action}?theme=dark"' in html
        assert " disabled>" not in html

    def test_controls_disabled_while_loading(self):
        html = CalendarRenderer().render_panel(
            _snapshot(state=ViewState.LOADING, navigation_disabled=True, message="Loading...")
        )

        assert html.count(" disabled>") == 4
        assert '<div class="loading">Loading...</div>' in html

    def test_rows(self):
        rows = [
            DayViewRow(
                time_text="09:30",
                duration_text="1h 30m",
                time_cell="09:30 (1h 30m)",
                title="Planning",
                meet_link="https://meet.google.com/abc",
                calendar_source="Team",
            ),
            DayViewRow(time_text="All-day", time_cell="All-day", title="Offsite"),
        ]

        html = CalendarRenderer().render_panel(_snapshot(rows=rows))

        assert "09:30 (1h 30m)" in html
        assert 'href="https://meet.google.com/abc"' in html
        assert "🎥" in html
        assert '<span class="calendar-source">• Team</span>' in html
        assert html.count("<tr>") == 2

    def test_empty_message(self):
        html = CalendarRenderer().render_panel(
            _snapshot(state=ViewState.EMPTY, message="Nothing today!")
        )

        assert '<p class="message">Nothing today!</p>' in html
        assert "<table" not in html

    def test_error_message(self):
        html = CalendarRenderer().render_panel(
            _snapshot(state=ViewState.ERROR, message="Error loading calendar events")
        )

        assert '<p class="message error">Error loading calendar events</p>' in html

    def test_text_is_escaped(self):
        rows = [DayViewRow(time_text="All-day", time_cell="All-day", title="<script>x</script>")]

        html = CalendarRenderer().render_panel(_snapshot(rows=rows))

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_light_theme(self):
        dark = CalendarRenderer(theme="dark").render_panel(_snapshot())
        light = CalendarRenderer(theme="light").render_panel(_snapshot())

        assert "#1e1e1e" in dark
        assert "#ffffff" in light

    def test_controls_keep_theme(self):
        """Posting a control returns to the panel in the same theme."""
        html = CalendarRenderer(theme="light").render_panel(_snapshot())

        assert 'action="/views/calendar/next?theme=light"' in html

    def test_theme_in_action_is_url_encoded(self):
        html = CalendarRenderer(theme='a&b"c').render_panel(_snapshot())

        assert 'action="/views/calendar/next?theme=a%26b%22c"' in html
