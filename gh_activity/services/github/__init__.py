"""
GitHub service package.

Re-exports all public types and classes.
Usage: `from gh_activity.services.github import GitHubReadOperations, Event`

Module structure:
- read_operations.py: Events API fetcher
- cache.py: TTL caches and the caching fetcher wrapper
- payloads.py: Per-type payload models and decoding
- helpers.py: Rate limit handling and error utilities
- types.py: Event and commit records
- exceptions.py: Custom exceptions
- constants.py: API constants and the event type catalogue
"""

from gh_activity.services.github.cache import (
    CacheEntry,
    CachedEventFetcher,
    EventCache,
    KeyedEventCache,
)
from gh_activity.services.github.constants import (
    EVENT_TYPE_DESCRIPTIONS,
    EventType,
    available_event_types,
    find_event_type,
)
from gh_activity.services.github.exceptions import (
    ErrorKind,
    GitHubAPIError,
    GitHubDecodeError,
    GitHubNetworkError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubUnauthorizedError,
    PayloadDecodeError,
    WrongEventTypeError,
)
from gh_activity.services.github.helpers import RateLimitInfo, handle_error_response
from gh_activity.services.github.http_client import close_github_client
from gh_activity.services.github.payloads import EventPayload, decode_payload
from gh_activity.services.github.read_operations import GitHubReadOperations
from gh_activity.services.github.types import Commit, Event, EventFetcher

__all__ = [
    # Fetcher
    "GitHubReadOperations",
    "EventFetcher",
    # HTTP client lifecycle
    "close_github_client",
    # Caching
    "CacheEntry",
    "CachedEventFetcher",
    "EventCache",
    "KeyedEventCache",
    # Payloads
    "EventPayload",
    "decode_payload",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "ErrorKind",
    "GitHubAPIError",
    "GitHubDecodeError",
    "GitHubNetworkError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubUnauthorizedError",
    "PayloadDecodeError",
    "WrongEventTypeError",
    # Types
    "Commit",
    "Event",
    # Constants
    "EVENT_TYPE_DESCRIPTIONS",
    "EventType",
    "available_event_types",
    "find_event_type",
]
