"""
Notice Service - transient, auto-dismissing user notifications.

Notices are the only way failures reach the user: a one-line message that
disappears after a few seconds. Nothing blocks on them.

Design follows the other in-memory services:
- In-memory storage with TTL
- Cleanup on read
- One instance per plugin, shared with its CalendarService

Usage:
    notices = NoticeService()
    notices.show("Google Calendar credentials not set.", level="warning")

    for notice in notices.active():
        print(notice.message)
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from gcal_notes.core.config import settings


logger = logging.getLogger("gcal.services.notices")


@dataclass
class Notice:
    """One user-visible notice."""
    message: str
    level: str = "info"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if this notice should have been dismissed."""
        if self.expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= self.expires_at


class NoticeService:
    """
    Keeps the notices that are currently visible.

    Every notice is also written to the log, at warning level for
    anything that is not plain info.
    """

    def __init__(self, duration_seconds: Optional[float] = None):
        self.duration_seconds = (
            settings.NOTICE_DURATION_SECONDS if duration_seconds is None else duration_seconds
        )
        self._notices: List[Notice] = []

    def show(self, message: str, level: str = "info", duration: Optional[float] = None) -> Notice:
        """
        Show a notice.

        Args:
            message: One line of text
            level: "info", "warning" or "error"
            duration: Seconds before auto-dismiss (defaults to the service duration)

        Returns:
            The stored Notice
        """
        seconds = self.duration_seconds if duration is None else duration
        notice = Notice(message=message, level=level)
        notice.expires_at = notice.created_at + timedelta(seconds=seconds)
        self._notices.append(notice)

        if level == "info":
            logger.info(f"Notice: {message}")
        else:
            logger.warning(f"Notice ({level}): {message}")

        return notice

    def active(self) -> List[Notice]:
        """Drop expired notices and return the ones still visible."""
        now = datetime.now(timezone.utc)
        self._notices = [n for n in self._notices if not n.is_expired(now)]
        return list(self._notices)

    def clear(self) -> None:
        self._notices.clear()
