"""Core shared kernel.

Settings, constants, Result types and error classes used by every other
layer. The core package has NO dependencies on other packages here.
"""

from story_spoiler.core.enums import ErrorCode
from story_spoiler.core.errors import (
    DomainError,
    StoryApiAuthenticationError,
    StoryApiError,
    StoryApiInvalidResponseError,
    StoryApiUnavailableError,
)
from story_spoiler.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "StoryApiAuthenticationError",
    "StoryApiError",
    "StoryApiInvalidResponseError",
    "StoryApiUnavailableError",
    "Success",
]
