"""Story Spoiler story endpoints client.

Endpoints:
    POST   /api/Story/Create       - Create a story (201, {storyId, msg})
    PUT    /api/Story/Edit/{id}    - Replace title/description (200, {msg})
    GET    /api/Story/All          - List all stories (200, JSON array)
    DELETE /api/Story/Delete/{id}  - Delete a story (200 {msg} or 204)

Every method returns the raw envelope whatever the status code; callers
decide which statuses they expect.
"""

from collections.abc import Mapping
from typing import Any

from story_spoiler.core.constants import (
    STORY_CREATE_PATH,
    STORY_DELETE_PATH,
    STORY_EDIT_PATH,
    STORY_LIST_PATH,
)
from story_spoiler.core.errors import StoryApiError
from story_spoiler.core.result import Result
from story_spoiler.domain.api_response import ApiResponse
from story_spoiler.domain.story import StoryPayload
from story_spoiler.infrastructure.api.base_api_client import BaseStoryAPIClient


class StoryAPI(BaseStoryAPIClient):
    """Client for story CRUD calls. Expects a bearer-authenticated httpx client."""

    def create_story(
        self, payload: StoryPayload | Mapping[str, Any]
    ) -> Result[ApiResponse, StoryApiError]:
        """Create a story.

        Args:
            payload: Story body. A plain mapping is sent as-is, which lets
                callers post incomplete bodies such as `{}`.
        """
        return self._execute(
            method="POST",
            path=STORY_CREATE_PATH,
            json_data=_to_json(payload),
            operation="create_story",
        )

    def edit_story(
        self, story_id: str, payload: StoryPayload | Mapping[str, Any]
    ) -> Result[ApiResponse, StoryApiError]:
        """Replace the title and description of a story."""
        return self._execute(
            method="PUT",
            path=STORY_EDIT_PATH.format(story_id=story_id),
            json_data=_to_json(payload),
            operation="edit_story",
        )

    def list_stories(self) -> Result[ApiResponse, StoryApiError]:
        """List all stories."""
        return self._execute(
            method="GET",
            path=STORY_LIST_PATH,
            operation="list_stories",
        )

    def delete_story(self, story_id: str) -> Result[ApiResponse, StoryApiError]:
        """Delete a story."""
        return self._execute(
            method="DELETE",
            path=STORY_DELETE_PATH.format(story_id=story_id),
            operation="delete_story",
        )


def _to_json(payload: StoryPayload | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(payload, StoryPayload):
        return payload.to_json()
    return dict(payload)
