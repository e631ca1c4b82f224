"""
Fetch Result Types - outcome of one event aggregation.

The aggregation never raises to its caller. It returns a FetchResult that
either carries the merged events or names which kind of failure occurred,
together with the notice text that was shown to the user.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from gcal_notes.environments.google.calendar.schemas import CalendarEvent


class FetchErrorKind(str, Enum):
    """Closed set of aggregation failures."""
    CONFIGURATION = "configuration"    # credentials missing, nothing sent
    AUTHENTICATION = "authentication"  # refresh token rejected
    REMOTE = "remote"                  # any other remote failure


@dataclass
class FetchResult:
    """
    Result of fetching one day's events.

    Attributes:
        events: Merged, sorted events; None when the fetch failed
        error: Failure kind; None on success
        message: Notice text for failures, empty on success
    """
    events: Optional[List[CalendarEvent]] = None
    error: Optional[FetchErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and self.events is not None

    @property
    def is_empty(self) -> bool:
        """Succeeded with zero events."""
        return self.ok and not self.events

    @classmethod
    def success(cls, events: List[CalendarEvent]) -> "FetchResult":
        return cls(events=events)

    @classmethod
    def failure(cls, error: FetchErrorKind, message: str) -> "FetchResult":
        return cls(events=None, error=error, message=message)
