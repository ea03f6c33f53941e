"""Machine-readable error codes.

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes for Story Spoiler API failures."""

    # Transport errors
    STORY_API_UNAVAILABLE = "story_api_unavailable"
    STORY_API_TIMEOUT = "story_api_timeout"

    # Authentication errors
    AUTHENTICATION_FAILED = "authentication_failed"
    TOKEN_MISSING = "token_missing"

    # Response errors
    RESPONSE_NOT_JSON = "response_not_json"
    RESPONSE_UNEXPECTED_FORMAT = "response_unexpected_format"
