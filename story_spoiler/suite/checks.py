"""Check helpers used by the cases.

Each helper raises CaseFailure with a message naming what was expected and
what came back, including a truncated body, so a failing run can be
diagnosed from the report alone.
"""

from story_spoiler.core.constants import RESPONSE_BODY_MAX_LENGTH
from story_spoiler.core.errors import StoryApiError
from story_spoiler.core.result import Failure, Result
from story_spoiler.domain.api_response import ApiResponse
from story_spoiler.suite.errors import CaseFailure


def unwrap(result: Result[ApiResponse, StoryApiError]) -> ApiResponse:
    """Return the response or fail the case on a transport error."""
    if isinstance(result, Failure):
        raise CaseFailure(
            f"Request failed before a response arrived: {result.error}",
            transient=getattr(result.error, "is_transient", False),
        )
    return result.value


def expect_status(response: ApiResponse, *expected: int) -> None:
    if response.status_code not in expected:
        wanted = " or ".join(str(code) for code in expected)
        raise CaseFailure(
            f"Expected status {wanted}, got {response.status_code}: {_snippet(response)}"
        )


def expect_message_contains(response: ApiResponse, phrase: str) -> str:
    """Check `msg` exists and contains `phrase`, ignoring case.

    Returns:
        str: The message.
    """
    message = response.message
    if message is None:
        raise CaseFailure(f"Response has no 'msg' field: {_snippet(response)}")
    if phrase.lower() not in message.lower():
        raise CaseFailure(f"Expected msg containing {phrase!r}, got {message!r}")
    return message


def expect_story_id(response: ApiResponse) -> str:
    story_id = response.story_id
    if not story_id:
        raise CaseFailure(f"Response has no 'storyId' field: {_snippet(response)}")
    return story_id


def expect_non_empty_list(response: ApiResponse) -> list:
    items = response.items
    if items is None:
        raise CaseFailure(f"Expected a JSON array: {_snippet(response)}")
    if not items:
        raise CaseFailure("Expected at least one story, got an empty list")
    return items


def _snippet(response: ApiResponse) -> str:
    if not response.has_body:
        return "<empty body>"
    return response.text[:RESPONSE_BODY_MAX_LENGTH]
