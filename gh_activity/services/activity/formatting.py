"""
Human-readable rendering of events.

`describe()` is total: payloads that fail to decode fall back to a generic
line instead of raising. `extract_commits()` is strict and raises, callers
that want graceful degradation catch the errors themselves.
"""

import logging
from collections.abc import Callable
from typing import cast

from gh_activity.services.github.constants import EventType
from gh_activity.services.github.exceptions import PayloadDecodeError, WrongEventTypeError
from gh_activity.services.github.payloads import (
    EventPayload,
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    RefPayload,
    ReleasePayload,
    decode_payload,
    known_event_type,
)
from gh_activity.services.github.types import Commit, Event

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending in "..." when shortened."""
    if len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return ELLIPSIS
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def title_case(word: str) -> str:
    """Uppercase the first character and lowercase the rest ("opened" -> "Opened")."""
    return word[:1].upper() + word[1:].lower()


def _describe_push(payload: PushPayload, repo: str) -> str:
    noun = "commit" if payload.size == 1 else "commits"
    return f"Pushed {payload.size} {noun} to {repo} (branch: {payload.branch})"


def _describe_create(payload: RefPayload, repo: str) -> str:
    return f"Created {payload.ref_type} '{payload.ref}' in {repo}"


def _describe_delete(payload: RefPayload, repo: str) -> str:
    return f"Deleted {payload.ref_type} '{payload.ref}' in {repo}"


def _describe_issues(payload: IssuesPayload, repo: str) -> str:
    issue = payload.issue
    return f"{title_case(payload.action)} issue #{issue.number} in {repo}: {issue.title}"


def _describe_pull_request(payload: PullRequestPayload, repo: str) -> str:
    pr = payload.pull_request
    return f"{title_case(payload.action)} pull request #{pr.number} in {repo}: {pr.title}"


def _describe_fork(payload: ForkPayload, repo: str) -> str:
    if payload.forkee.full_name:
        return f"Forked {repo} to {payload.forkee.full_name}"
    return f"Forked {repo}"


def _describe_issue_comment(payload: IssuesPayload, repo: str) -> str:
    return f"Commented on issue #{payload.issue.number} in {repo}"


def _describe_release(payload: ReleasePayload, repo: str) -> str:
    return f"Released {payload.release.tag_name} in {repo}"


_DESCRIBERS: dict[EventType, Callable[..., str]] = {
    EventType.PUSH: _describe_push,
    EventType.CREATE: _describe_create,
    EventType.DELETE: _describe_delete,
    EventType.ISSUES: _describe_issues,
    EventType.PULL_REQUEST: _describe_pull_request,
    EventType.WATCH: lambda _payload, repo: f"Starred {repo}",
    EventType.FORK: _describe_fork,
    EventType.ISSUE_COMMENT: _describe_issue_comment,
    EventType.PUBLIC: lambda _payload, repo: f"Made {repo} public",
    EventType.MEMBER: lambda _payload, repo: f"Added a member to {repo}",
    EventType.RELEASE: _describe_release,
}

# Used instead of the generic "{type} in {repo}" when the payload is unreadable
_DECODE_FALLBACKS: dict[EventType, str] = {
    EventType.FORK: "Forked {repo}",
    EventType.ISSUE_COMMENT: "Commented on an issue in {repo}",
    EventType.RELEASE: "Created a release in {repo}",
}


def describe(event: Event) -> str:
    """Return a one-line description of an event. Never raises."""
    repo = event.repository_name
    generic = f"{event.type} in {repo}"

    event_type = known_event_type(event)
    if event_type is None:
        return generic

    try:
        payload = decode_payload(event)
    except PayloadDecodeError as e:
        logger.debug(f"Describing event {event.id} without payload: {e.reason}")
        fallback = _DECODE_FALLBACKS.get(event_type)
        return fallback.format(repo=repo) if fallback else generic

    return _DESCRIBERS[event_type](payload, repo)


def extract_commits(event: Event) -> list[Commit]:
    """
    Get the commits of a push event.

    Raises:
        WrongEventTypeError: If the event is not a PushEvent
        PayloadDecodeError: If the payload cannot be parsed as a push
    """
    if known_event_type(event) is not EventType.PUSH:
        raise WrongEventTypeError(EventType.PUSH.value, event.type)

    payload = cast(PushPayload, decode_payload(event))
    return [commit.to_commit() for commit in payload.commits]


def event_details(event: Event) -> dict[str, str]:
    """
    Type-specific extra fields for the detailed view.

    Empty for unknown types, payload-less types, and undecodable payloads.
    """
    try:
        payload: EventPayload = decode_payload(event)
    except PayloadDecodeError:
        return {}

    if isinstance(payload, PushPayload):
        return {"branch": payload.branch}
    if isinstance(payload, RefPayload):
        return {"ref_type": payload.ref_type, "ref": payload.ref}
    if isinstance(payload, IssuesPayload):
        return {
            "action": payload.action,
            "number": str(payload.issue.number),
            "title": payload.issue.title,
        }
    if isinstance(payload, PullRequestPayload):
        return {
            "action": payload.action,
            "number": str(payload.pull_request.number),
            "title": payload.pull_request.title,
        }
    if isinstance(payload, ForkPayload):
        return {"forkee": payload.forkee.full_name} if payload.forkee.full_name else {}
    if isinstance(payload, ReleasePayload):
        return {"tag": payload.release.tag_name, "name": payload.release.name}
    return {}
