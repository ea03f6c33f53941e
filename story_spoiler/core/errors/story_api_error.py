"""Story Spoiler API error types.

These are the failure cases the API clients return inside a Result. HTTP
status codes are not errors here: the suite asserts on 400/404 responses,
so a response with any status is a Success. Only transport failures and
bodies that cannot be read where a shape is required become errors.

Usage:
    from story_spoiler.core.errors import StoryApiUnavailableError
    from story_spoiler.core.result import Failure

    return Failure(error=StoryApiUnavailableError(
        code=ErrorCode.STORY_API_TIMEOUT,
        message="Story Spoiler API request timed out",
        operation="create_story",
    ))
"""

from dataclasses import dataclass

from story_spoiler.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiError(DomainError):
    """Base Story Spoiler API error.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        operation: Client operation that failed (e.g. "create_story").
        details: Additional context.
    """

    operation: str


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiUnavailableError(StoryApiError):
    """Request never produced a response (timeout, DNS, refused connection).

    Attributes:
        is_transient: Always True for transport failures.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiAuthenticationError(StoryApiError):
    """Login was rejected or did not yield a usable access token.

    Attributes:
        status_code: HTTP status of the login response, if one was received.
    """

    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StoryApiInvalidResponseError(StoryApiError):
    """Response body could not be parsed into the expected shape.

    Attributes:
        status_code: HTTP status of the response.
        response_body: Truncated raw body for debugging.
    """

    status_code: int | None = None
    response_body: str | None = None
