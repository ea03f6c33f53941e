"""Console logging adapter.

Outputs structured logs to stdout using structlog.
- Development: human-readable console renderer with colors
- CI / JSON mode: JSON renderer for machine parsing

Creating an adapter configures structlog process-wide, so module-level
loggers obtained with `structlog.get_logger(__name__)` (as the API clients
do) render through the same processors.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from story_spoiler.core.config import Settings


class ConsoleAdapter:
    """Console logger for suite runs.

    Args:
        use_json (bool): JSON output when True (CI), human-readable when False.
        level (str): Minimum level name to emit.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        """Initialize the console adapter and configure structlog.

        Args:
            use_json (bool): JSON output when True (CI), human-readable when False.
            level (str): Minimum level name to emit (e.g. "INFO").
        """
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(
                logging.getLevelNamesMapping()[level.upper()]
            ),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=False,
        )

        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug message."""
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info message."""
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning message."""
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error message with optional exception details.

        Args:
            message (str): Message text.
            error (Exception | None): Optional exception instance.
            **context: Structured key-value context.
        """
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return new adapter with bound context.

        Args:
            **context: Context to bind to all subsequent logs.

        Returns:
            ConsoleAdapter: New adapter instance with bound context.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter


def configure_logging(settings: Settings) -> ConsoleAdapter:
    """Install console logging for a suite run.

    Args:
        settings: Settings providing log level and renderer choice.

    Returns:
        ConsoleAdapter: Adapter bound to the configured pipeline.
    """
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
