"""
Google OAuth Client - Exchanges a refresh token for an access token.

The user pastes a long-lived refresh token (plus the client id and secret of
their own Google Cloud OAuth client) into the settings. Before every fetch
we trade it for a short-lived access token at the token endpoint.

Error mapping:
==============
- 200                          → OAuthTokens
- 4xx with error=invalid_grant → AuthenticationError (expired/revoked token)
- any other non-200            → RemoteFetchError
- network failure              → RemoteFetchError

References:
===========
- OAuth 2.0: https://developers.google.com/identity/protocols/oauth2
- Token endpoint: https://oauth2.googleapis.com/token
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from gcal_notes.core.config import settings
from gcal_notes.environments.base import (
    OAuthTokens,
    AuthenticationError,
    RemoteFetchError,
)
from gcal_notes.environments.google.auth.schemas import (
    GoogleTokenError,
    GoogleTokenResponse,
)


logger = logging.getLogger("gcal.environments.google.auth")


class GoogleAuthClient:
    """
    Google OAuth 2.0 refresh-token client.

    Example Usage:
        client = GoogleAuthClient(client_id="...", client_secret="...")
        tokens = await client.refresh_access_token("1//0eXyz...")
        calendar = GoogleCalendarClient(access_token=tokens.access_token)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Google OAuth client.

        Args:
            client_id: Google OAuth Client ID
            client_secret: Google OAuth Client Secret
            token_url: Token endpoint override (defaults to settings)
            transport: Optional httpx transport (used by tests)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url or settings.GOOGLE_TOKEN_URL
        self._transport = transport

    # -------------------------------------------------------------------------
    # TOKEN REFRESH
    # -------------------------------------------------------------------------

    async def refresh_access_token(self, refresh_token: str) -> OAuthTokens:
        """
        Use the refresh token to get a new access token.

        Args:
            refresh_token: The long-lived refresh token from the settings

        Returns:
            OAuthTokens with new access_token (refresh_token usually unchanged)

        Raises:
            AuthenticationError: If Google answers invalid_grant
            RemoteFetchError: For any other failure
        """
        refresh_data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }

        logger.info("Refreshing access token")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    self.token_url,
                    data=refresh_data,
                    timeout=settings.HTTP_TIMEOUT_SECONDS,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error during token refresh: {e}")
                raise RemoteFetchError(f"Network error: {e}")

        if response.status_code != 200:
            error = _parse_token_error(response)
            if error.is_invalid_grant():
                logger.warning(
                    "Refresh token rejected",
                    extra={"error_description": error.error_description},
                )
                raise AuthenticationError(error.error_description or error.error)

            error_msg = error.error_description or error.error
            logger.error(f"Token refresh failed: {response.status_code} - {error_msg}")
            raise RemoteFetchError(
                f"Token refresh failed: {error_msg}",
                status_code=response.status_code,
                response=response.text,
            )

        try:
            token_response = GoogleTokenResponse(**response.json())
        except (TypeError, ValueError, ValidationError) as e:
            logger.error(f"Unreadable token response: {e}")
            raise RemoteFetchError(
                "Token refresh failed: unreadable response",
                status_code=response.status_code,
                response=response.text,
            )

        logger.info(
            "Successfully refreshed access token",
            extra={"expires_in": token_response.expires_in}
        )

        # Google may or may not rotate the refresh token
        return OAuthTokens(
            access_token=token_response.access_token,
            token_type=token_response.token_type,
            refresh_token=token_response.refresh_token or refresh_token,
            expires_at=token_response.get_expires_at(),
            scopes=token_response.get_scopes_list(),
        )


def _parse_token_error(response: httpx.Response) -> GoogleTokenError:
    """Parse the token endpoint's error body, tolerating non-JSON answers."""
    try:
        payload = response.json()
    except ValueError:
        return GoogleTokenError(error_description=response.text or None)

    if not isinstance(payload, dict):
        return GoogleTokenError(error_description=response.text or None)

    error = payload.get("error")
    # Some Google errors nest the code: {"error": {"status": ..., "message": ...}}
    if isinstance(error, dict):
        return GoogleTokenError(
            error=str(error.get("status") or "unknown_error"),
            error_description=error.get("message"),
        )
    return GoogleTokenError(
        error=error or "unknown_error",
        error_description=payload.get("error_description"),
    )
