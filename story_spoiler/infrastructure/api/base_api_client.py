"""Base API client for Story Spoiler HTTP communication.

This module provides the shared plumbing of the Story Spoiler API clients:
- HTTP client construction (base URL, timeout, optional bearer auth)
- Request execution with timeout/connection error handling
- Lenient JSON decoding into an ApiResponse envelope
- Structured logging with operation context

Unlike a typical provider client, non-2xx statuses are NOT turned into
errors: the suite needs to see 400 and 404 responses to assert on them.
Only failures that produce no response at all become a Failure.

Architecture:
    - Infrastructure layer (adapter for the external API)
    - Uses a synchronous httpx.Client owned by the caller
    - Returns Result types (no exceptions for transport errors)
"""

from typing import Any

import httpx
import structlog

from story_spoiler.core.constants import REQUEST_TIMEOUT_DEFAULT
from story_spoiler.core.enums import ErrorCode
from story_spoiler.core.errors import StoryApiError, StoryApiUnavailableError
from story_spoiler.core.result import Failure, Result, Success
from story_spoiler.domain.api_response import ApiResponse
from story_spoiler.infrastructure.api.bearer_auth import BearerAuth

logger = structlog.get_logger(__name__)


def build_http_client(
    *,
    base_url: str,
    timeout: float = REQUEST_TIMEOUT_DEFAULT,
    token: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an httpx client for the Story Spoiler API.

    Args:
        base_url: API base URL (e.g., "https://d3s5nxhwblsjbi.cloudfront.net").
        timeout: Request timeout in seconds.
        token: Bearer token to attach to every request. None for the
            unauthenticated login client.
        transport: Optional transport override (used by tests to route
            requests to an in-process fake service).

    Returns:
        httpx.Client: Client the caller must close.
    """
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        timeout=timeout,
        auth=BearerAuth(token) if token is not None else None,
        transport=transport,
    )


class BaseStoryAPIClient:
    """Base class for Story Spoiler API clients with shared HTTP handling.

    Attributes:
        _http: httpx client bound to the API base URL.
        _logger: Structured logger.

    Example:
        >>> class StoryAPI(BaseStoryAPIClient):
        ...     def list_stories(self):
        ...         return self._execute(
        ...             method="GET",
        ...             path="/api/Story/All",
        ...             operation="list_stories",
        ...         )
    """

    def __init__(self, http: httpx.Client) -> None:
        """Initialize base API client.

        Args:
            http: httpx client bound to the API base URL. Not closed here.
        """
        self._http = http
        self._logger = logger

    def _execute(
        self,
        *,
        method: str,
        path: str,
        json_data: Any = None,
        operation: str,
    ) -> Result[ApiResponse, StoryApiError]:
        """Execute HTTP request and wrap the response in an ApiResponse.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            path: URL path relative to the client's base URL.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(ApiResponse): Any HTTP response, whatever its status.
            Failure(StoryApiUnavailableError): On timeout or connection error.
        """
        try:
            response = self._http.request(method, path, json=json_data)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "story_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=StoryApiUnavailableError(
                    code=ErrorCode.STORY_API_TIMEOUT,
                    message="Story Spoiler API request timed out",
                    operation=operation,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "story_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=StoryApiUnavailableError(
                    code=ErrorCode.STORY_API_UNAVAILABLE,
                    message=f"Failed to connect to Story Spoiler API: {e}",
                    operation=operation,
                )
            )

        self._logger.debug(
            "story_api_request_completed",
            operation=operation,
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return Success(value=self._to_api_response(response, operation))

    def _to_api_response(self, response: httpx.Response, operation: str) -> ApiResponse:
        """Decode the body as JSON when possible.

        Empty and non-JSON bodies are kept as text with `body=None`; whether
        that is acceptable is up to the caller.
        """
        text = response.text
        body: Any = None
        if text.strip():
            try:
                body = response.json()
            except ValueError:
                self._logger.debug(
                    "story_api_non_json_body",
                    operation=operation,
                    status_code=response.status_code,
                )

        return ApiResponse(status_code=response.status_code, text=text, body=body)
