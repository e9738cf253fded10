"""
Activity package.

Filtering, rendering and summarizing of GitHub event feeds.
Usage: `from gh_activity.services.activity import ActivityService, EventFilter`
"""

from gh_activity.services.activity.exceptions import (
    ActivityError,
    EmptySubjectError,
    FetchError,
    NegativeLimitError,
    UnknownEventTypeError,
)
from gh_activity.services.activity.filters import EventFilter, apply_filter
from gh_activity.services.activity.formatting import describe, extract_commits, truncate
from gh_activity.services.activity.service import ActivityService, create_activity_service
from gh_activity.services.activity.summaries import build_detailed, build_summary
from gh_activity.services.activity.types import (
    DEFAULT_LIMIT,
    ActivityOptions,
    ActivitySummary,
    CommitSummary,
    DetailedActivity,
)

__all__ = [
    # Service
    "ActivityService",
    "create_activity_service",
    # Filtering
    "EventFilter",
    "apply_filter",
    # Rendering
    "build_detailed",
    "build_summary",
    "describe",
    "extract_commits",
    "truncate",
    # Exceptions
    "ActivityError",
    "EmptySubjectError",
    "FetchError",
    "NegativeLimitError",
    "UnknownEventTypeError",
    # Types
    "DEFAULT_LIMIT",
    "ActivityOptions",
    "ActivitySummary",
    "CommitSummary",
    "DetailedActivity",
]
