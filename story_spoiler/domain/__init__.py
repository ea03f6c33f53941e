"""Domain types: story payloads and the API response envelope."""

from story_spoiler.domain.api_response import ApiResponse
from story_spoiler.domain.story import (
    StoryPayload,
    edited_story,
    new_story,
    placeholder_story,
    random_story_id,
)

__all__ = [
    "ApiResponse",
    "StoryPayload",
    "edited_story",
    "new_story",
    "placeholder_story",
    "random_story_id",
]
