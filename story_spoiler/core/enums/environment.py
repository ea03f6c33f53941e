"""Runtime environment types.

Used by Settings to pick the log renderer.

Environments:
- DEVELOPMENT: Local runs, human-readable console logs
- CI: Continuous integration, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    CI = "ci"
