"""Core enums package.

Usage:
    from story_spoiler.core.enums import ErrorCode, Environment
"""

from story_spoiler.core.enums.environment import Environment
from story_spoiler.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
