"""
Notices Router - the notices currently visible to the user.

Expired notices are dropped on read.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from gcal_notes.deps import get_plugin
from gcal_notes.plugin import CalendarPlugin


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/notices", tags=["notices"])


class NoticeResponse(BaseModel):
    """
    Example response:
    {
        "message": "Google Calendar credentials not set.",
        "level": "warning",
        "created_at": "2024-01-15T09:00:00Z",
        "expires_at": "2024-01-15T09:00:05Z"
    }
    """
    message: str
    level: str
    created_at: datetime
    expires_at: Optional[datetime] = None


@router.get("", response_model=List[NoticeResponse])
async def list_notices(plugin: CalendarPlugin = Depends(get_plugin)):
    return [
        NoticeResponse(
            message=notice.message,
            level=notice.level,
            created_at=notice.created_at,
            expires_at=notice.expires_at,
        )
        for notice in plugin.notices.active()
    ]
