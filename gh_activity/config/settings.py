from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # GitHub API
    github_api_url: str = "https://api.github.com"
    # Optional personal access token; raises the rate limit from 60 to 5000 req/hour
    github_token: str = ""
    github_user_agent: str = "github-activity-cli"
    # Timeouts for the shared HTTP client (seconds)
    github_timeout_seconds: float = 10.0
    github_connect_timeout_seconds: float = 5.0
    # Page size for /users/{username}/events (GitHub caps this at 100)
    events_per_page: int = 30

    # In-memory event cache lifetime (seconds)
    cache_ttl_seconds: float = 300.0

    # CLI defaults
    default_limit: int = 30
    log_level: str = "WARNING"

    @property
    def github_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


settings = Settings()
