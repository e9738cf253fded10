"""Event filtering: type match plus a cap on the number of results."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice

from gh_activity.services.github.types import Event


@dataclass(frozen=True)
class EventFilter:
    """Filtering criteria for an event feed."""

    type_match: str | None = None  # Compared case-insensitively; None/"" matches all
    max_results: int = 0  # 0 (or negative) means unbounded

    def matches(self, event: Event) -> bool:
        """Check if an event satisfies the type criterion."""
        if not self.type_match:
            return True
        return event.type.casefold() == self.type_match.casefold()


def iter_matching(events: Iterable[Event], event_filter: EventFilter) -> Iterator[Event]:
    """Yield matching events in input order, stopping once the cap is reached."""
    matching = (event for event in events if event_filter.matches(event))
    if event_filter.max_results > 0:
        return islice(matching, event_filter.max_results)
    return matching


def apply_filter(events: Iterable[Event], event_filter: EventFilter) -> list[Event]:
    """
    Apply a filter in a single pass.

    Events past the cap are never examined, so downstream cost is bounded by
    `max_results` rather than by the size of the feed.
    """
    return list(iter_matching(events, event_filter))
