"""
Activity service: fetch, filter and summarize a user's event feed.

Every operation performs at most one fetch through the injected fetcher
(normally a CachedEventFetcher), so repeated calls within one run hit the
cache instead of the API.
"""

import logging
from collections import Counter

from gh_activity.config import Settings, settings
from gh_activity.services.activity.exceptions import EmptySubjectError, FetchError
from gh_activity.services.activity.filters import EventFilter, iter_matching
from gh_activity.services.activity.summaries import build_detailed, build_summary
from gh_activity.services.activity.types import ActivitySummary, DetailedActivity
from gh_activity.services.github.cache import CachedEventFetcher, EventCache
from gh_activity.services.github.exceptions import GitHubAPIError
from gh_activity.services.github.read_operations import GitHubReadOperations
from gh_activity.services.github.types import Event, EventFetcher

logger = logging.getLogger(__name__)


class ActivityService:
    """Use cases over a user's GitHub activity feed."""

    def __init__(self, fetcher: EventFetcher):
        self.fetcher = fetcher

    async def _fetch(self, username: str) -> list[Event]:
        if not username.strip():
            raise EmptySubjectError()

        try:
            return await self.fetcher.fetch_events(username)
        except GitHubAPIError as e:
            logger.warning(f"Fetching events for {username} failed ({e.kind.value}): {e}")
            raise FetchError(username, e) from e

    async def get_user_activity(
        self,
        username: str,
        event_filter: EventFilter | None = None,
    ) -> list[ActivitySummary]:
        """
        Fetch, filter and summarize a user's recent activity.

        Raises:
            EmptySubjectError: If username is blank
            FetchError: If the feed could not be fetched
        """
        events = await self._fetch(username)
        return [build_summary(e) for e in iter_matching(events, event_filter or EventFilter())]

    async def get_user_activity_detailed(
        self,
        username: str,
        event_filter: EventFilter | None = None,
    ) -> list[DetailedActivity]:
        """Detailed variant of get_user_activity; the filter cap applies identically."""
        events = await self._fetch(username)
        return [build_detailed(e) for e in iter_matching(events, event_filter or EventFilter())]

    async def statistics(self, username: str) -> dict[str, int]:
        """Count events per type over the whole (unfiltered) feed."""
        events = await self._fetch(username)
        return dict(Counter(event.type for event in events))

    async def recent_repositories(self, username: str, limit: int = 0) -> list[str]:
        """
        List repositories the user was active in, most recent first.

        Duplicates are dropped keeping the first occurrence; `limit` <= 0
        means no cap.
        """
        events = await self._fetch(username)

        repos: list[str] = []
        seen: set[str] = set()
        for event in events:
            if event.repository_name in seen:
                continue
            seen.add(event.repository_name)
            repos.append(event.repository_name)
            if limit > 0 and len(repos) >= limit:
                break

        return repos


def create_activity_service(config: Settings = settings) -> ActivityService:
    """Wire the GitHub fetcher, a single-entry cache and the service together."""
    fetcher = CachedEventFetcher(
        GitHubReadOperations(config),
        EventCache(ttl=config.cache_ttl_seconds),
    )
    return ActivityService(fetcher)
