"""
GitHub API helper utilities.

Provides rate limit handling and error response processing for GitHub API calls.
"""

import logging

import httpx

from gh_activity.services.github.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubUnauthorizedError,
)

logger = logging.getLogger(__name__)


def _parse_header_int(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring malformed rate limit header value {value!r}")
        return None


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")
        # Parsed once; a missing or malformed header reads as None
        self.remaining_count = _parse_header_int(self.remaining)
        self.reset_timestamp = _parse_header_int(self.reset)

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining_count == 0


def handle_error_response(response: httpx.Response, username: str) -> None:
    """
    Handle common error responses from the GitHub events API.

    Args:
        response: The HTTP response from GitHub API
        username: User whose events were requested (for error context)

    Raises:
        GitHubNotFoundError: If the user does not exist (404)
        GitHubUnauthorizedError: If authentication failed (401)
        GitHubRateLimitError: If the rate limit is exceeded (403/429)
        GitHubAPIError: For any other non-200 status
    """
    rate_info = RateLimitInfo(response)

    if response.status_code == 404:
        raise GitHubNotFoundError(f"User '{username}' not found", 404)
    elif response.status_code == 401:
        raise GitHubUnauthorizedError("Invalid or expired GitHub token", 401)
    elif response.status_code in (403, 429):
        # Unauthenticated event requests only get 403 for exhausted quota
        if not rate_info.is_exhausted:
            logger.debug(
                f"Got {response.status_code} for {username} with "
                f"{rate_info.remaining!r} requests remaining"
            )
        raise GitHubRateLimitError(
            "GitHub API rate limit exceeded",
            response.status_code,
            rate_limit_reset=rate_info.reset_timestamp,
        )
    elif response.status_code != 200:
        raise GitHubAPIError(
            f"GitHub API error: {response.status_code}", response.status_code
        )
