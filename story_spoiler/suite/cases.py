"""The ordered Story Spoiler cases.

Cases run in `STORY_CASES` order and share a StoryRunContext. Create
records the new story's id; edit and delete read it, so they fail with a
clear message when create did not pass. The remaining cases only touch
random identifiers or empty bodies and run independently.
"""

from collections.abc import Callable
from dataclasses import dataclass

from story_spoiler.core.constants import (
    CREATED_MESSAGE,
    DELETED_MESSAGE,
    DELETE_FAILED_MESSAGE,
    EDITED_MESSAGE,
    NOT_FOUND_MESSAGE,
)
from story_spoiler.domain.story import (
    edited_story,
    new_story,
    placeholder_story,
    random_story_id,
)
from story_spoiler.suite.checks import (
    expect_message_contains,
    expect_non_empty_list,
    expect_status,
    expect_story_id,
    unwrap,
)
from story_spoiler.suite.context import StoryRunContext
from story_spoiler.suite.errors import CaseFailure


def create_story_returns_created(ctx: StoryRunContext) -> None:
    response = unwrap(ctx.api.create_story(new_story()))
    expect_status(response, 201)
    ctx.record_story_id(expect_story_id(response))
    expect_message_contains(response, CREATED_MESSAGE)


def edit_story_returns_ok(ctx: StoryRunContext) -> None:
    story_id = ctx.require_story_id()
    response = unwrap(ctx.api.edit_story(story_id, edited_story()))
    expect_status(response, 200)
    expect_message_contains(response, EDITED_MESSAGE)


def list_stories_returns_stories(ctx: StoryRunContext) -> None:
    response = unwrap(ctx.api.list_stories())
    expect_status(response, 200)
    expect_non_empty_list(response)


def delete_story_returns_ok(ctx: StoryRunContext) -> None:
    story_id = ctx.require_story_id()
    response = unwrap(ctx.api.delete_story(story_id))
    expect_status(response, 200, 204)
    if response.status_code == 200 and response.has_body:
        expect_message_contains(response, DELETED_MESSAGE)


def create_story_without_fields_returns_bad_request(ctx: StoryRunContext) -> None:
    response = unwrap(ctx.api.create_story({}))
    expect_status(response, 400)


def edit_missing_story_returns_not_found(ctx: StoryRunContext) -> None:
    """Accept 404 or 400 with a "No spoilers" msg or some other error body.

    A blank body fails, which is stricter than the earlier suite on purpose:
    that suite let a blank body pass.
    """
    response = unwrap(ctx.api.edit_story(random_story_id(), placeholder_story()))
    expect_status(response, 404, 400)
    if response.has_field("msg"):
        expect_message_contains(response, NOT_FOUND_MESSAGE)
    elif not response.has_body:
        raise CaseFailure("Expected an error body for a missing story, got none")


def delete_missing_story_returns_bad_request(ctx: StoryRunContext) -> None:
    response = unwrap(ctx.api.delete_story(random_story_id()))
    expect_status(response, 400)
    expect_message_contains(response, DELETE_FAILED_MESSAGE)


@dataclass(frozen=True, slots=True)
class StoryCase:
    """One named step of the ordered run.

    Attributes:
        order: 1-based position in the run.
        name: Case name used in logs and reports.
        run: Callable performing the requests and checks.
    """

    order: int
    name: str
    run: Callable[[StoryRunContext], None]


STORY_CASES: tuple[StoryCase, ...] = tuple(
    StoryCase(order=index, name=func.__name__, run=func)
    for index, func in enumerate(
        (
            create_story_returns_created,
            edit_story_returns_ok,
            list_stories_returns_stories,
            delete_story_returns_ok,
            create_story_without_fields_returns_bad_request,
            edit_missing_story_returns_not_found,
            delete_missing_story_returns_bad_request,
        ),
        start=1,
    )
)
