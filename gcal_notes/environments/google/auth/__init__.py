"""
Google Auth Module - refresh-token authentication for Google Calendar.

The settings hold a refresh token obtained out of band (see README);
this module only performs the refresh-token exchange.
"""

from gcal_notes.environments.google.auth.client import GoogleAuthClient
from gcal_notes.environments.google.auth.schemas import (
    GoogleTokenError,
    GoogleTokenResponse,
)

__all__ = [
    "GoogleAuthClient",
    "GoogleTokenError",
    "GoogleTokenResponse",
]
