"""Centralized constants for the Story Spoiler API contract.

This module holds fixed details of the remote API (paths, wording of its
messages) and internal limits. Anything that differs per environment
(base URL, credentials, timeout) lives in `story_spoiler/core/config.py`.

Example:
    >>> from story_spoiler.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_API_BASE_URL: str = "https://d3s5nxhwblsjbi.cloudfront.net"
"""Public deployment of the Story Spoiler API."""

DEFAULT_API_USERNAME: str = "ico1"
DEFAULT_API_PASSWORD: str = "ico1ico1"

REQUEST_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for Story Spoiler API calls in seconds."""


# =============================================================================
# Endpoints
# =============================================================================

AUTHENTICATION_PATH: str = "/api/User/Authentication"
STORY_CREATE_PATH: str = "/api/Story/Create"
STORY_EDIT_PATH: str = "/api/Story/Edit/{story_id}"
STORY_LIST_PATH: str = "/api/Story/All"
STORY_DELETE_PATH: str = "/api/Story/Delete/{story_id}"


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Service messages (matched case-insensitively)
# =============================================================================

CREATED_MESSAGE: str = "Successfully created!"
EDITED_MESSAGE: str = "Successfully edited"
DELETED_MESSAGE: str = "Deleted successfully!"
NOT_FOUND_MESSAGE: str = "No spoilers"
DELETE_FAILED_MESSAGE: str = "Unable to delete this story spoiler!"


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in errors and failure messages."""
