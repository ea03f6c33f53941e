"""Exceptions raised at the suite boundary.

Everything below the suite returns Result values; these are the two places
where a failure becomes an exception.
"""

from story_spoiler.core.errors import StoryApiError


class SessionSetupError(Exception):
    """Login did not yield a usable token, so no case can run.

    Attributes:
        error: The API error that stopped the setup.
    """

    def __init__(self, error: StoryApiError) -> None:
        super().__init__(f"Story session setup failed: {error}")
        self.error = error


class CaseFailure(AssertionError):
    """A case check failed.

    Subclasses AssertionError so pytest reports it as a test failure
    rather than an error.

    Attributes:
        transient: True when the request never got a response (timeout,
            refused connection), so a rerun may pass.
    """

    def __init__(self, message: str, *, transient: bool = False) -> None:
        super().__init__(message)
        self.transient = transient
