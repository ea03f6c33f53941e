"""State shared by the ordered cases of one run."""

from dataclasses import dataclass

from story_spoiler.infrastructure.api import StoryAPI
from story_spoiler.suite.errors import CaseFailure


@dataclass(slots=True)
class StoryRunContext:
    """Mutable per-run state passed to every case.

    Attributes:
        api: Authenticated story client.
        created_story_id: Identifier recorded by the create case, "" until then.
    """

    api: StoryAPI
    created_story_id: str = ""

    def record_story_id(self, story_id: str) -> None:
        self.created_story_id = story_id

    def require_story_id(self) -> str:
        """Return the created story's id.

        Raises:
            CaseFailure: If no story has been created in this run.
        """
        if not self.created_story_id:
            raise CaseFailure(
                "No story id recorded for this run; the create case must pass first"
            )
        return self.created_story_id
