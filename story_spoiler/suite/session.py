"""Authenticated session lifecycle.

One session per run: log in once through an unauthenticated client, then
keep a single bearer-authenticated client open until the run ends.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import httpx

from story_spoiler.core.config import Settings
from story_spoiler.core.result import Failure
from story_spoiler.infrastructure.api import (
    AuthenticationAPI,
    StoryAPI,
    build_http_client,
)
from story_spoiler.infrastructure.logging import ConsoleAdapter, configure_logging
from story_spoiler.suite.errors import SessionSetupError


@dataclass(frozen=True, slots=True)
class StorySession:
    """Authenticated access to the story endpoints.

    Attributes:
        api: Story client sharing `http`.
        http: Bearer-authenticated httpx client, closed when the session ends.
    """

    api: StoryAPI
    http: httpx.Client


def login(
    settings: Settings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Exchange the configured credentials for a bearer token.

    Raises:
        SessionSetupError: If the API is unreachable or returns no token.
    """
    with build_http_client(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        transport=transport,
    ) as http:
        result = AuthenticationAPI(http).authenticate(
            settings.api_username, settings.api_password
        )

    if isinstance(result, Failure):
        raise SessionSetupError(result.error)
    return result.value


@contextmanager
def open_story_session(
    settings: Settings,
    *,
    transport: httpx.BaseTransport | None = None,
    logger: ConsoleAdapter | None = None,
) -> Iterator[StorySession]:
    """Log in and yield an authenticated session, closing it on exit.

    Args:
        settings: Base URL, credentials and timeout.
        transport: Optional httpx transport override for both the login
            client and the authenticated client.
        logger: Console adapter for session events. Built from `settings`
            when not given.

    Yields:
        StorySession: Session whose client is closed on normal exit and
            when the body raises.

    Raises:
        SessionSetupError: If login fails. Nothing is left open.
    """
    if logger is None:
        logger = configure_logging(settings)

    try:
        token = login(settings, transport=transport)
    except SessionSetupError as e:
        logger.error(
            "story_session_login_failed",
            error=e,
            error_code=e.error.code.value,
        )
        raise

    http = build_http_client(
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        token=token,
        transport=transport,
    )
    logger.info("story_session_opened", base_url=settings.api_base_url)
    try:
        yield StorySession(api=StoryAPI(http), http=http)
    finally:
        http.close()
        logger.info("story_session_closed")
