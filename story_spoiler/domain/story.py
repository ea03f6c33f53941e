"""Story payloads sent to the Story Spoiler API.

The API accepts the same `{title, description, url}` body for create and
edit. The factories below produce the payloads used by the ordered suite;
titles carry a random or time-based suffix so each run creates a distinct
story.
"""

import time
import uuid
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryPayload:
    """Request body for create and edit calls.

    Attributes:
        title: Story title.
        description: Story description.
        url: Optional picture URL (empty string when unused).
    """

    title: str
    description: str
    url: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON body expected by the API."""
        return asdict(self)


def new_story() -> StoryPayload:
    """Payload for a fresh story with a unique title, e.g. "New Story ab12cd"."""
    return StoryPayload(
        title=f"New Story {uuid.uuid4().hex[:6]}",
        description="Test story description",
    )


def edited_story() -> StoryPayload:
    """Payload replacing a story's title and description."""
    # 100ns ticks keep the title unique between runs started within a second
    return StoryPayload(
        title=f"Edited Title {time.time_ns() // 100}",
        description="Edited description",
    )


def placeholder_story() -> StoryPayload:
    """Minimal valid payload for calls expected to fail on the identifier."""
    return StoryPayload(title="X", description="Y")


def random_story_id() -> str:
    """Syntactically valid identifier that no stored story has."""
    return str(uuid.uuid4())
