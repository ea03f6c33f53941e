"""Core errors package.

Usage:
    from story_spoiler.core.errors import DomainError, StoryApiError
"""

from story_spoiler.core.errors.domain_error import DomainError
from story_spoiler.core.errors.story_api_error import (
    StoryApiAuthenticationError,
    StoryApiError,
    StoryApiInvalidResponseError,
    StoryApiUnavailableError,
)

__all__ = [
    "DomainError",
    "StoryApiError",
    "StoryApiAuthenticationError",
    "StoryApiInvalidResponseError",
    "StoryApiUnavailableError",
]
