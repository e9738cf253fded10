"""Data types for the activity service."""

from dataclasses import dataclass, field

from gh_activity.services.activity.exceptions import NegativeLimitError, UnknownEventTypeError
from gh_activity.services.activity.filters import EventFilter
from gh_activity.services.github.constants import find_event_type

DEFAULT_LIMIT = 30


@dataclass
class ActivitySummary:
    """Compact, display-ready view of one event."""

    description: str
    type: str
    repository: str
    timestamp: str  # YYYY-MM-DD HH:MM:SS in the event's own timezone


@dataclass
class CommitSummary:
    """Commit as shown in a detailed activity."""

    sha: str  # Short form
    message: str  # First line, truncated
    author: str


@dataclass
class DetailedActivity(ActivitySummary):
    """Summary plus identifiers and type-specific details."""

    event_id: str = ""
    actor_login: str = ""
    commit_count: int = 0
    commits: list[CommitSummary] = field(default_factory=list)
    details: dict[str, str] = field(default_factory=dict)


@dataclass
class ActivityOptions:
    """Options for an activity query, as given by the user."""

    event_type: str = ""
    limit: int = DEFAULT_LIMIT
    detailed: bool = False

    def validate(self) -> None:
        """
        Validate the options.

        Raises:
            NegativeLimitError: If limit < 0
            UnknownEventTypeError: If event_type names no cataloged type
        """
        if self.limit < 0:
            raise NegativeLimitError(self.limit)

        if self.event_type and find_event_type(self.event_type) is None:
            raise UnknownEventTypeError(self.event_type)

    def to_filter(self) -> EventFilter:
        return EventFilter(type_match=self.event_type or None, max_results=self.limit)
