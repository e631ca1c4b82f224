"""
Google OAuth Schemas - Data structures for the refresh-token exchange.

Using Pydantic models ensures the token endpoint's answers are validated
before anything downstream relies on them.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, List
from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# TOKEN RESPONSES
# ---------------------------------------------------------------------------

class GoogleTokenResponse(BaseModel):
    """
    Successful response from Google's token endpoint.

    Example response for grant_type=refresh_token:
    {
        "access_token": "ya29.a0AfB_byC...",
        "expires_in": 3599,
        "scope": "https://www.googleapis.com/auth/calendar.readonly",
        "token_type": "Bearer"
    }

    Google only includes refresh_token when it rotates the token.
    """
    access_token: str = Field(..., description="OAuth access token")
    token_type: str = Field(default="Bearer", description="Token type (usually Bearer)")
    expires_in: Optional[int] = Field(None, description="Seconds until expiration")
    refresh_token: Optional[str] = Field(None, description="Rotated refresh token, if any")
    scope: Optional[str] = Field(None, description="Space-separated scopes granted")

    def get_scopes_list(self) -> List[str]:
        """Convert space-separated scope string to list."""
        if self.scope:
            return self.scope.split()
        return []

    def get_expires_at(self) -> Optional[datetime]:
        """Calculate expiration datetime from expires_in seconds."""
        if self.expires_in:
            return datetime.now(timezone.utc) + timedelta(seconds=self.expires_in)
        return None


class GoogleTokenError(BaseModel):
    """
    Error body from Google's token endpoint.

    Example:
    {
        "error": "invalid_grant",
        "error_description": "Token has been expired or revoked."
    }
    """
    error: str = Field("unknown_error", description="OAuth error code")
    error_description: Optional[str] = Field(None, description="Human readable detail")

    def is_invalid_grant(self) -> bool:
        """The refresh token is expired, revoked or does not match the client."""
        return self.error == "invalid_grant"
