"""
GitHub API read operations.

Fetches the public event feed of a user and normalizes it into Event records.
Payloads are passed through untouched; they are decoded per type later.
"""

import logging

import httpx
from pydantic import ValidationError

from gh_activity.config import Settings, settings
from gh_activity.services.github.constants import ACCEPT_HEADER, API_VERSION, MAX_PER_PAGE
from gh_activity.services.github.exceptions import GitHubDecodeError, GitHubNetworkError
from gh_activity.services.github.helpers import RateLimitInfo, handle_error_response
from gh_activity.services.github.http_client import get_github_client
from gh_activity.services.github.payloads import RawEvent
from gh_activity.services.github.types import Event

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only operations for the GitHub events API.

    Implements the EventFetcher protocol. Uses the shared HTTP client
    singleton; timeouts are configured there and nothing is retried.
    """

    def __init__(self, config: Settings = settings):
        self.base_url = config.github_api_url.rstrip("/")
        self.per_page = min(config.events_per_page, MAX_PER_PAGE)
        self._headers = {
            "Accept": ACCEPT_HEADER,
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": config.github_user_agent,
        }
        if config.github_authenticated:
            self._headers["Authorization"] = f"Bearer {config.github_token}"
        self.last_rate_limit: RateLimitInfo | None = None

    async def fetch_events(self, username: str) -> list[Event]:
        """
        Fetch the most recent public events performed by a user.

        Args:
            username: GitHub login

        Returns:
            Events in feed order (newest first)

        Raises:
            GitHubNotFoundError: Unknown user
            GitHubUnauthorizedError: Bad token
            GitHubRateLimitError: Rate limit exhausted
            GitHubNetworkError: Timeout or transport failure
            GitHubDecodeError: Body is not a list of well-formed events
            GitHubAPIError: Any other non-200 response
        """
        client = get_github_client()
        url = f"{self.base_url}/users/{username}/events"
        logger.info(f"Fetching events for {username}")

        try:
            response = await client.get(
                url,
                headers=self._headers,
                params={"per_page": self.per_page},
            )
        except httpx.TimeoutException as e:
            raise GitHubNetworkError(f"Request to GitHub timed out: {e}") from e
        except httpx.TransportError as e:
            raise GitHubNetworkError(f"Failed to reach GitHub: {e}") from e

        self.last_rate_limit = RateLimitInfo(response)
        handle_error_response(response, username)

        try:
            data = response.json()
        except ValueError as e:
            raise GitHubDecodeError(f"Failed to parse JSON: {e}") from e

        if not isinstance(data, list):
            raise GitHubDecodeError(
                f"Expected a list of events, got {type(data).__name__}"
            )

        try:
            events = [RawEvent.model_validate(item).to_event() for item in data]
        except ValidationError as e:
            raise GitHubDecodeError(f"Malformed event in response: {e}") from e

        logger.info(
            f"Fetched {len(events)} events for {username} "
            f"(rate limit remaining: {self.last_rate_limit.remaining_count})"
        )
        return events
