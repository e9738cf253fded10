"""Data types for GitHub API responses."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from gh_activity.services.github.constants import SHORT_SHA_LENGTH


@dataclass(frozen=True)
class Event:
    """Normalized event from the GitHub events API."""

    id: str
    type: str  # Open tag, e.g. "PushEvent"; unknown types are kept as-is
    actor_login: str
    repository_name: str  # owner/repo
    created_at: datetime
    # Raw payload as returned by the API (mapping, or JSON text/bytes).
    # Only interpreted once `type` is known, see payloads.decode_payload().
    payload: Any = None


@dataclass(frozen=True)
class Commit:
    """A commit listed in a push event payload."""

    sha: str
    message: str
    author_name: str
    author_email: str = ""

    @property
    def short_sha(self) -> str:
        """First 7 characters of the SHA, or the whole SHA if shorter."""
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def first_line(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]


class EventFetcher(Protocol):
    """Anything that can return the ordered event feed for a user."""

    async def fetch_events(self, username: str) -> list[Event]: ...
