"""Exceptions raised by the activity service."""

from gh_activity.services.github.exceptions import ErrorKind, GitHubAPIError


class ActivityError(Exception):
    """Base class for errors reported to the caller of the activity service."""


class EmptySubjectError(ActivityError):
    """Raised when the username is empty or whitespace."""

    def __init__(self) -> None:
        super().__init__("username cannot be empty")


class NegativeLimitError(ActivityError):
    """Raised when a negative result limit is requested."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__("limit cannot be negative")


class UnknownEventTypeError(ActivityError):
    """Raised when a type filter names no cataloged event type."""

    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"invalid event type: {event_type}")


class FetchError(ActivityError):
    """Raised when the event feed could not be fetched.

    Wraps the GitHub error (also chained as __cause__) and exposes its kind
    so callers can tell a missing user from a rate limit or network failure.
    """

    def __init__(self, username: str, error: GitHubAPIError):
        self.username = username
        self.error = error
        super().__init__(f"failed to fetch events: {error}")

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
