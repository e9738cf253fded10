"""Pydantic shapes for event payloads, one per known event type.

Payloads arrive untyped; `decode_payload()` is the single place that turns an
event's raw payload into one of these models based on the event type. Types
outside the catalogue decode to `UnknownPayload`, types that carry nothing
worth reading decode to `EmptyPayload` without touching the raw data.

Field defaults mirror how GitHub omits or nulls fields: a missing or null
field falls back to its default, a field of the wrong type fails validation.
`RawEvent` applies the same rules to the event envelope itself.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from gh_activity.services.github.constants import BRANCH_REF_PREFIX, EventType
from gh_activity.services.github.exceptions import PayloadDecodeError
from gh_activity.services.github.types import Commit, Event


class _PayloadModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class CommitAuthor(_PayloadModel):
    name: str = ""
    email: str = ""


class PushCommit(_PayloadModel):
    sha: str = ""
    message: str = ""
    author: CommitAuthor = Field(default_factory=CommitAuthor)

    def to_commit(self) -> Commit:
        return Commit(
            sha=self.sha,
            message=self.message,
            author_name=self.author.name,
            author_email=self.author.email,
        )


class PushPayload(_PayloadModel):
    """Payload of PushEvent."""

    size: int = 0
    ref: str = ""
    commits: list[PushCommit] = Field(default_factory=list)

    @property
    def branch(self) -> str:
        """Branch name with the refs/heads/ prefix removed (if present)."""
        return self.ref.removeprefix(BRANCH_REF_PREFIX)


class RefPayload(_PayloadModel):
    """Payload of CreateEvent and DeleteEvent."""

    ref: str = ""
    ref_type: str = ""
    description: str = ""


class IssueRef(_PayloadModel):
    number: int = 0
    title: str = ""
    state: str = ""


class IssuesPayload(_PayloadModel):
    """Payload of IssuesEvent and IssueCommentEvent."""

    action: str = ""
    issue: IssueRef = Field(default_factory=IssueRef)


class PullRequestPayload(_PayloadModel):
    """Payload of PullRequestEvent."""

    action: str = ""
    pull_request: IssueRef = Field(default_factory=IssueRef)


class Forkee(_PayloadModel):
    full_name: str = ""


class ForkPayload(_PayloadModel):
    """Payload of ForkEvent."""

    forkee: Forkee = Field(default_factory=Forkee)


class ReleaseInfo(_PayloadModel):
    tag_name: str = ""
    name: str = ""


class ReleasePayload(_PayloadModel):
    """Payload of ReleaseEvent."""

    action: str = ""
    release: ReleaseInfo = Field(default_factory=ReleaseInfo)


class EmptyPayload(_PayloadModel):
    """Known event type whose description needs nothing from the payload."""


class UnknownPayload(_PayloadModel):
    """Event type outside the catalogue; the raw payload is kept untouched."""

    event_type: str
    raw: Any = None


EventPayload = (
    PushPayload
    | RefPayload
    | IssuesPayload
    | PullRequestPayload
    | ForkPayload
    | ReleasePayload
    | EmptyPayload
    | UnknownPayload
)

class EventActor(_PayloadModel):
    login: str = ""


class EventRepo(_PayloadModel):
    name: str = ""


class RawEvent(_PayloadModel):
    """
    Envelope of one item of the events feed.

    Only the envelope is validated here; `payload` is kept raw until its
    type is known.
    """

    id: int | str
    type: str
    actor: EventActor = Field(default_factory=EventActor)
    repo: EventRepo = Field(default_factory=EventRepo)
    created_at: datetime
    payload: Any = None

    def to_event(self) -> Event:
        return Event(
            id=str(self.id),
            type=self.type,
            actor_login=self.actor.login,
            repository_name=self.repo.name,
            created_at=self.created_at,
            payload=self.payload,
        )


PAYLOAD_MODELS: dict[EventType, type[_PayloadModel]] = {
    EventType.PUSH: PushPayload,
    EventType.CREATE: RefPayload,
    EventType.DELETE: RefPayload,
    EventType.ISSUES: IssuesPayload,
    EventType.PULL_REQUEST: PullRequestPayload,
    EventType.WATCH: EmptyPayload,
    EventType.FORK: ForkPayload,
    EventType.ISSUE_COMMENT: IssuesPayload,
    EventType.PUBLIC: EmptyPayload,
    EventType.MEMBER: EmptyPayload,
    EventType.RELEASE: ReleasePayload,
}


def known_event_type(event: Event) -> EventType | None:
    """Return the cataloged type of an event (exact match), or None."""
    try:
        return EventType(event.type)
    except ValueError:
        return None


def decode_payload(event: Event) -> EventPayload:
    """
    Decode an event's raw payload into the model for its type.

    Raises:
        PayloadDecodeError: If the payload is missing or does not fit the shape
    """
    event_type = known_event_type(event)
    if event_type is None:
        return UnknownPayload(event_type=event.type, raw=event.payload)

    model = PAYLOAD_MODELS[event_type]
    if model is EmptyPayload:
        return EmptyPayload()

    raw = event.payload
    if raw is None:
        raise PayloadDecodeError(event.type, "payload is missing")

    try:
        if isinstance(raw, (str, bytes, bytearray)):
            decoded = model.model_validate_json(raw)
        else:
            decoded = model.model_validate(raw)
    except ValidationError as e:
        raise PayloadDecodeError(event.type, str(e)) from e
    return decoded  # type: ignore[return-value]
