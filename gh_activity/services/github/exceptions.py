"""Exceptions for GitHub service."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of failures at the GitHub API boundary."""

    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    NETWORK_ERROR = "network_error"
    DECODE_ERROR = "decode_error"
    API_ERROR = "api_error"


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    kind: ErrorKind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubNotFoundError(GitHubAPIError):
    """User or resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND


class GitHubUnauthorizedError(GitHubAPIError):
    """Token missing, invalid or expired (401)."""

    kind = ErrorKind.UNAUTHORIZED


class GitHubRateLimitError(GitHubAPIError):
    """Rate limit exhausted (403/429)."""

    kind = ErrorKind.RATE_LIMITED


class GitHubNetworkError(GitHubAPIError):
    """Timeout or transport failure before a response was received."""

    kind = ErrorKind.NETWORK_ERROR


class GitHubDecodeError(GitHubAPIError):
    """Response body could not be turned into events."""

    kind = ErrorKind.DECODE_ERROR


class PayloadDecodeError(Exception):
    """Event payload does not match the shape expected for its type."""

    def __init__(self, event_type: str, reason: str):
        self.event_type = event_type
        self.reason = reason
        super().__init__(f"failed to parse {event_type} payload: {reason}")


class WrongEventTypeError(Exception):
    """Operation requires a different event type."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"event is not a {expected} (got {actual})")
