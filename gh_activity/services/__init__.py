# Services package

from gh_activity.services.activity import ActivityService, create_activity_service
from gh_activity.services.github import GitHubReadOperations

__all__ = [
    # Activity services
    "ActivityService",
    "create_activity_service",
    # GitHub services
    "GitHubReadOperations",
]
