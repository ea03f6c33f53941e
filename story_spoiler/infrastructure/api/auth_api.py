"""Story Spoiler authentication API client.

Exchanges a user name and password for a JWT access token.

Endpoints:
    POST /api/User/Authentication - body {userName, password},
        returns {accessToken, ...}
"""

from story_spoiler.core.constants import AUTHENTICATION_PATH, RESPONSE_BODY_MAX_LENGTH
from story_spoiler.core.enums import ErrorCode
from story_spoiler.core.errors import (
    StoryApiAuthenticationError,
    StoryApiError,
    StoryApiInvalidResponseError,
)
from story_spoiler.core.result import Failure, Result, Success
from story_spoiler.infrastructure.api.base_api_client import BaseStoryAPIClient


class AuthenticationAPI(BaseStoryAPIClient):
    """Login client. Must be given an httpx client WITHOUT bearer auth.

    Example:
        >>> with build_http_client(base_url=url) as http:
        ...     result = AuthenticationAPI(http).authenticate("ico1", "ico1ico1")
    """

    def authenticate(
        self,
        user_name: str,
        password: str,
    ) -> Result[str, StoryApiError]:
        """Log in and return the bearer token.

        Args:
            user_name: Account user name.
            password: Account password.

        Returns:
            Success(str): Non-empty access token.
            Failure(StoryApiUnavailableError): If the API is unreachable.
            Failure(StoryApiAuthenticationError): If login is rejected or
                the response has no usable `accessToken`.
            Failure(StoryApiInvalidResponseError): RESPONSE_NOT_JSON if the
                body is not JSON, RESPONSE_UNEXPECTED_FORMAT if it is JSON
                but not an object.
        """
        operation = "authenticate"
        result = self._execute(
            method="POST",
            path=AUTHENTICATION_PATH,
            json_data={"userName": user_name, "password": password},
            operation=operation,
        )
        if isinstance(result, Failure):
            return result

        response = result.value

        if response.status_code != 200:
            self._logger.warning(
                "story_api_auth_rejected",
                operation=operation,
                status_code=response.status_code,
            )
            return Failure(
                error=StoryApiAuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=f"Login rejected with status {response.status_code}",
                    operation=operation,
                    status_code=response.status_code,
                )
            )

        if not isinstance(response.body, dict):
            # None: empty or undecodable body
            if response.body is None:
                code = ErrorCode.RESPONSE_NOT_JSON
                message = "Login response is not JSON"
            else:
                code = ErrorCode.RESPONSE_UNEXPECTED_FORMAT
                message = "Login response is not a JSON object"
            self._logger.warning(
                "story_api_unexpected_format",
                operation=operation,
                data_type=type(response.body).__name__,
            )
            return Failure(
                error=StoryApiInvalidResponseError(
                    code=code,
                    message=message,
                    operation=operation,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        token = response.body.get("accessToken")
        if not isinstance(token, str) or not token:
            self._logger.warning("story_api_token_missing", operation=operation)
            return Failure(
                error=StoryApiAuthenticationError(
                    code=ErrorCode.TOKEN_MISSING,
                    message="Login response has no accessToken",
                    operation=operation,
                    status_code=response.status_code,
                )
            )

        self._logger.info("story_api_authenticated", user_name=user_name)
        return Success(value=token)
