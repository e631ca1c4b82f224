"""
Tests for the Google OAuth refresh-token client.

These tests verify:
- The token request body
- Successful exchange (with and without a rotated refresh token)
- invalid_grant mapping to AuthenticationError
- Every other failure mapping to RemoteFetchError
"""

from urllib.parse import parse_qs

import httpx
import pytest

from gcal_notes.environments.base import AuthenticationError, RemoteFetchError
from gcal_notes.environments.google.auth import GoogleAuthClient


TOKEN_URL = "https://oauth.test/token"


def make_client(handler) -> GoogleAuthClient:
    return GoogleAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        token_url=TOKEN_URL,
        transport=httpx.MockTransport(handler),
    )


class TestRefreshAccessToken:
    """Tests for GoogleAuthClient.refresh_access_token."""

    @pytest.mark.asyncio
    async def test_posts_refresh_grant(self):
        """Should POST the refresh_token grant as a form."""
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "POST"
            assert str(request.url) == TOKEN_URL
            bodies.append(parse_qs(request.content.decode()))
            return httpx.Response(200, json={"access_token": "ya29.new", "expires_in": 3599})

        await make_client(handler).refresh_access_token("1//refresh")

        assert bodies[0] == {
            "client_id": ["client-id"],
            "client_secret": ["client-secret"],
            "refresh_token": ["1//refresh"],
            "grant_type": ["refresh_token"],
        }

    @pytest.mark.asyncio
    async def test_success_keeps_refresh_token(self):
        """Google usually omits refresh_token; the old one is kept."""
        client = make_client(lambda request: httpx.Response(200, json={
            "access_token": "ya29.new",
            "expires_in": 3599,
            "scope": "https://www.googleapis.com/auth/calendar.readonly",
            "token_type": "Bearer",
        }))

        tokens = await client.refresh_access_token("1//refresh")

        assert tokens.access_token == "ya29.new"
        assert tokens.refresh_token == "1//refresh"
        assert tokens.scopes == ["https://www.googleapis.com/auth/calendar.readonly"]
        assert tokens.expires_at is not None

    @pytest.mark.asyncio
    async def test_success_with_rotated_refresh_token(self):
        client = make_client(lambda request: httpx.Response(200, json={
            "access_token": "ya29.new",
            "refresh_token": "1//rotated",
        }))

        tokens = await client.refresh_access_token("1//refresh")

        assert tokens.refresh_token == "1//rotated"

    @pytest.mark.asyncio
    async def test_invalid_grant_is_authentication_error(self):
        client = make_client(lambda request: httpx.Response(400, json={
            "error": "invalid_grant",
            "error_description": "Token has been expired or revoked.",
        }))

        with pytest.raises(AuthenticationError) as exc_info:
            await client.refresh_access_token("1//revoked")

        assert "expired or revoked" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_other_client_error_is_remote_error(self):
        client = make_client(lambda request: httpx.Response(401, json={
            "error": "invalid_client",
            "error_description": "The OAuth client was not found.",
        }))

        with pytest.raises(RemoteFetchError) as exc_info:
            await client.refresh_access_token("1//refresh")

        assert exc_info.value.status_code == 401
        assert "OAuth client was not found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(RemoteFetchError) as exc_info:
            await client.refresh_access_token("1//refresh")

        assert exc_info.value.status_code == 502
        assert "Bad Gateway" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(RemoteFetchError):
            await make_client(handler).refresh_access_token("1//refresh")

    @pytest.mark.asyncio
    async def test_html_body_on_200_is_remote_error(self):
        """A captive portal page answering 200 is not a token."""
        client = make_client(lambda request: httpx.Response(
            200, text="<html>captive portal</html>", headers={"content-type": "text/html"}
        ))

        with pytest.raises(RemoteFetchError) as exc_info:
            await client.refresh_access_token("1//refresh")

        assert exc_info.value.status_code == 200
        assert "captive portal" in exc_info.value.response

    @pytest.mark.asyncio
    async def test_token_body_without_access_token_is_remote_error(self):
        client = make_client(lambda request: httpx.Response(200, json={"token_type": "Bearer"}))

        with pytest.raises(RemoteFetchError):
            await client.refresh_access_token("1//refresh")
