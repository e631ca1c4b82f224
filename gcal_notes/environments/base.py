"""
Base classes and shared types for the remote calendar integration.

This module defines the error taxonomy every remote call maps onto and the
token structure returned by the OAuth refresh exchange.

Error taxonomy:
===============
- ConfigurationError: credentials are missing, nothing was sent
- AuthenticationError: the refresh token was rejected (invalid_grant)
- RemoteFetchError: any other failure talking to the remote API

The service layer catches all three at the API seam and turns them into a
FetchResult plus a user-visible notice. They never reach the host.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, List, Any


# ---------------------------------------------------------------------------
# CUSTOM EXCEPTIONS
# ---------------------------------------------------------------------------


class CalendarError(Exception):
    """Base exception for all calendar integration errors."""
    pass


class ConfigurationError(CalendarError):
    """Raised when client id, client secret or refresh token is missing."""
    pass


class AuthenticationError(CalendarError):
    """Raised when the token endpoint rejects the refresh token (invalid_grant)."""
    pass


class RemoteFetchError(CalendarError):
    """Raised when a call to the token endpoint or Calendar API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# ---------------------------------------------------------------------------
# DATA STRUCTURES
# ---------------------------------------------------------------------------


@dataclass
class OAuthTokens:
    """
    Tokens obtained from a refresh-token exchange.

    Only access_token is used for the Calendar API calls; the rest is kept
    for logging and for callers that want to cache the token.
    """
    access_token: str
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    scopes: Optional[List[str]] = None
