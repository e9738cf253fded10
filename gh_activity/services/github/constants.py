"""Constants for GitHub service."""

from enum import Enum

API_VERSION = "2022-11-28"
ACCEPT_HEADER = "application/vnd.github+json"
MAX_PER_PAGE = 100

# Prefix stripped from push refs to get the branch name
BRANCH_REF_PREFIX = "refs/heads/"

SHORT_SHA_LENGTH = 7


class EventType(str, Enum):
    """Event types from the GitHub events API that get a dedicated description."""

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    PUBLIC = "PublicEvent"
    MEMBER = "MemberEvent"
    RELEASE = "ReleaseEvent"


# Human descriptions, used by --list-types and option validation
EVENT_TYPE_DESCRIPTIONS: dict[EventType, str] = {
    EventType.PUSH: "Git push",
    EventType.CREATE: "Branch or tag creation",
    EventType.DELETE: "Branch or tag deletion",
    EventType.ISSUES: "Issue opened, closed, etc.",
    EventType.PULL_REQUEST: "PR opened, closed, merged, etc.",
    EventType.WATCH: "Repository starred",
    EventType.FORK: "Repository forked",
    EventType.ISSUE_COMMENT: "Comment on issue or PR",
    EventType.PUBLIC: "Repository made public",
    EventType.MEMBER: "Member added to repository",
    EventType.RELEASE: "Release published",
}


def available_event_types() -> dict[EventType, str]:
    """Return the catalogue of known event types with their descriptions."""
    return dict(EVENT_TYPE_DESCRIPTIONS)


def find_event_type(name: str) -> EventType | None:
    """Look up a cataloged event type by name, ignoring case."""
    wanted = name.casefold()
    for event_type in EventType:
        if event_type.value.casefold() == wanted:
            return event_type
    return None
