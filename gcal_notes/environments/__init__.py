"""
Environments Module - External Service Integrations

Architecture Overview:
======================
environments/
├── __init__.py           # Module exports
├── base.py               # Error taxonomy and token structure
└── google/               # Google Calendar integration
    ├── auth/             # Refresh-token exchange
    └── calendar/         # Calendar API client, schemas, renderer
"""

from gcal_notes.environments.base import (
    CalendarError,
    ConfigurationError,
    AuthenticationError,
    RemoteFetchError,
    OAuthTokens,
)

__all__ = [
    "CalendarError",
    "ConfigurationError",
    "AuthenticationError",
    "RemoteFetchError",
    "OAuthTokens",
]
