"""
Tests for the HTTP surface (views, commands, settings, notices).

All Google traffic goes to the fake clients from conftest.
"""

from gcal_notes.environments.google.calendar.schemas import CalendarInfo
from gcal_notes.schemas.settings import SECRET_PLACEHOLDER


TEAM_ID = "team@group.calendar.google.com"


def _configure(client):
    response = client.patch("/settings", json={
        "client_id": "1234.apps.googleusercontent.com",
        "client_secret": "GOCSPX-secret",
        "refresh_token": "1//0e-refresh",
    })
    assert response.status_code == 200


# ---------------------------------------------------------------------------
# HEALTH
# ---------------------------------------------------------------------------

def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ---------------------------------------------------------------------------
# VIEWS
# ---------------------------------------------------------------------------

class TestViewsRouter:
    """Tests for /views/calendar."""

    def test_requires_open_view(self, client):
        assert client.get("/views/calendar/state").status_code == 409
        assert client.get("/views/calendar").status_code == 409
        assert client.post("/views/calendar/next").status_code == 409

    def test_open_renders_today(self, client):
        _configure(client)

        response = client.post("/views/calendar/open")

        assert response.status_code == 200
        assert response.json()["state"] == "empty"
        assert response.json()["message"] == "Nothing today!"

    def test_open_without_credentials_is_error_state(self, client):
        response = client.post("/views/calendar/open")

        assert response.json()["state"] == "error"
        notices = client.get("/notices").json()
        assert [n["message"] for n in notices] == ["Google Calendar credentials not set."]

    def test_navigation(self, client, fake_calendar):
        _configure(client)
        opened = client.post("/views/calendar/open").json()

        response = client.post("/views/calendar/next")

        body = response.json()
        assert body["accepted"] is True
        assert body["snapshot"]["date"] > opened["date"]

        back = client.post("/views/calendar/previous").json()
        assert back["snapshot"]["date"] == opened["date"]

        assert client.post("/views/calendar/today").json()["accepted"] is True
        assert client.post("/views/calendar/refresh").json()["accepted"] is True

    def test_panel_form_post_returns_to_panel(self, client):
        """A header control submitted from the panel lands back on the HTML panel."""
        _configure(client)
        opened = client.post("/views/calendar/open").json()

        response = client.post(
            "/views/calendar/next?theme=light",
            headers={"content-type": "application/x-www-form-urlencoded"},
            content=b"",
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "#ffffff" in response.text
        assert client.get("/views/calendar/state").json()["date"] > opened["date"]

    def test_form_post_redirect_keeps_query(self, client):
        client.post("/views/calendar/open")

        response = client.post(
            "/views/calendar/refresh?theme=light",
            headers={"content-type": "application/x-www-form-urlencoded"},
            content=b"",
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/views/calendar?theme=light"

    def test_html_panel(self, client):
        client.post("/views/calendar/open")

        response = client.get("/views/calendar", params={"theme": "light"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'class="message error"' in response.text

    def test_close(self, client, plugin):
        client.post("/views/calendar/open")

        assert client.delete("/views/calendar").status_code == 204
        assert plugin.view is None


# ---------------------------------------------------------------------------
# COMMANDS
# ---------------------------------------------------------------------------

class TestCommandsRouter:
    """Tests for /commands."""

    def test_list(self, client):
        ids = [c["id"] for c in client.get("/commands").json()]

        assert ids == ["gcal:open-view", "gcal:insert-events"]

    def test_insert_events(self, client):
        response = client.post("/commands/gcal:insert-events")

        assert response.status_code == 200
        assert response.json()["text"] == "No events today.\n"

    def test_open_view(self, client, plugin):
        response = client.post("/commands/gcal:open-view")

        assert response.status_code == 200
        assert response.json()["view"]["state"] == "error"
        assert plugin.view is not None

    def test_unknown_command(self, client):
        assert client.post("/commands/gcal:nope").status_code == 404


# ---------------------------------------------------------------------------
# SETTINGS
# ---------------------------------------------------------------------------

class TestSettingsRouter:
    """Tests for /settings."""

    def test_get_masks_secrets(self, client):
        _configure(client)

        body = client.get("/settings").json()

        assert body["client_id"] == "1234.apps.googleusercontent.com"
        assert body["client_secret"] == SECRET_PLACEHOLDER
        assert body["refresh_token"] == SECRET_PLACEHOLDER

    def test_empty_client_id_keeps_value(self, client):
        _configure(client)

        body = client.patch("/settings", json={"client_id": ""}).json()

        assert body["client_id"] == "1234.apps.googleusercontent.com"
        assert "Client ID cannot be empty" in [n["message"] for n in client.get("/notices").json()]

    def test_discover_and_toggle(self, client, fake_calendar, plugin):
        _configure(client)
        fake_calendar.calendars = [
            CalendarInfo(id="me@example.com", summary="Me", primary=True),
            CalendarInfo(id=TEAM_ID, summary="Team"),
        ]

        options = client.post("/settings/calendars/discover").json()
        assert options == [{"id": TEAM_ID, "summary": "Team", "enabled": False}]

        response = client.put(f"/settings/calendars/{TEAM_ID}", json={"enabled": True})
        assert response.status_code == 200
        assert response.json()["calendar_ids"] == [TEAM_ID]
        assert plugin.store.load().calendar_ids == [TEAM_ID]

        response = client.put(f"/settings/calendars/{TEAM_ID}", json={"enabled": False})
        assert response.json()["calendar_ids"] == []
