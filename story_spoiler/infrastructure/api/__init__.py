"""Story Spoiler API clients.

Usage:
    from story_spoiler.infrastructure.api import StoryAPI, build_http_client
"""

from story_spoiler.infrastructure.api.auth_api import AuthenticationAPI
from story_spoiler.infrastructure.api.base_api_client import (
    BaseStoryAPIClient,
    build_http_client,
)
from story_spoiler.infrastructure.api.bearer_auth import BearerAuth
from story_spoiler.infrastructure.api.story_api import StoryAPI

__all__ = [
    "AuthenticationAPI",
    "BaseStoryAPIClient",
    "BearerAuth",
    "StoryAPI",
    "build_http_client",
]
