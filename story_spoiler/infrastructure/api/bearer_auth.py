"""httpx authentication flow attaching a bearer token to every request."""

from collections.abc import Generator

import httpx

from story_spoiler.core.constants import BEARER_PREFIX


class BearerAuth(httpx.Auth):
    """Sets `Authorization: Bearer <token>` on each outgoing request.

    Example:
        >>> client = httpx.Client(base_url=url, auth=BearerAuth(token))
    """

    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"{BEARER_PREFIX}{self._token}"
        yield request
