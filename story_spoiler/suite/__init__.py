"""Ordered Story Spoiler test run: session, cases and runner."""

from story_spoiler.suite.cases import STORY_CASES, StoryCase
from story_spoiler.suite.context import StoryRunContext
from story_spoiler.suite.errors import CaseFailure, SessionSetupError
from story_spoiler.suite.runner import (
    CaseOutcome,
    StorySuiteRunner,
    SuiteReport,
    run_story_suite,
)
from story_spoiler.suite.session import StorySession, login, open_story_session

__all__ = [
    "STORY_CASES",
    "CaseFailure",
    "CaseOutcome",
    "SessionSetupError",
    "StoryCase",
    "StoryRunContext",
    "StorySession",
    "StorySuiteRunner",
    "SuiteReport",
    "login",
    "open_story_session",
    "run_story_suite",
]
