"""Builders turning events into summaries and detailed activities."""

import logging

from gh_activity.services.activity.formatting import (
    describe,
    event_details,
    extract_commits,
    truncate,
)
from gh_activity.services.activity.types import ActivitySummary, CommitSummary, DetailedActivity
from gh_activity.services.github.constants import EventType
from gh_activity.services.github.exceptions import PayloadDecodeError
from gh_activity.services.github.types import Event

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
COMMIT_MESSAGE_MAX_LENGTH = 60


def build_summary(event: Event) -> ActivitySummary:
    """Create a summary; the timestamp keeps the event's own timezone."""
    return ActivitySummary(
        description=describe(event),
        type=event.type,
        repository=event.repository_name,
        timestamp=event.created_at.strftime(TIMESTAMP_FORMAT),
    )


def build_detailed(event: Event) -> DetailedActivity:
    """
    Create a detailed activity.

    Push events get their commits listed. A push payload that cannot be
    decoded yields zero commits rather than an error.
    """
    summary = build_summary(event)
    activity = DetailedActivity(
        description=summary.description,
        type=summary.type,
        repository=summary.repository,
        timestamp=summary.timestamp,
        event_id=event.id,
        actor_login=event.actor_login,
        details=event_details(event),
    )

    if event.type == EventType.PUSH.value:
        try:
            commits = extract_commits(event)
        except PayloadDecodeError as e:
            logger.debug(f"No commits for push event {event.id}: {e.reason}")
            commits = []

        activity.commit_count = len(commits)
        activity.commits = [
            CommitSummary(
                sha=commit.short_sha,
                message=truncate(commit.first_line, COMMIT_MESSAGE_MAX_LENGTH),
                author=commit.author_name,
            )
            for commit in commits
        ]

    return activity
