"""Sequential runner for the ordered Story Spoiler cases.

The runner executes every case exactly once, in order, against a single
authenticated session. A failing case is recorded and the run moves on;
only a failed login aborts the run (SessionSetupError propagates).

Usage:
    from story_spoiler.core.config import get_settings
    from story_spoiler.suite.runner import run_story_suite

    report = run_story_suite(get_settings())
    assert report.all_passed, report.failed
"""

import time
from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx

from story_spoiler.core.config import Settings
from story_spoiler.infrastructure.logging import ConsoleAdapter, configure_logging
from story_spoiler.suite.cases import STORY_CASES, StoryCase
from story_spoiler.suite.context import StoryRunContext
from story_spoiler.suite.session import StorySession, open_story_session


@dataclass(frozen=True, slots=True, kw_only=True)
class CaseOutcome:
    """Result of running one case.

    Attributes:
        order: Position of the case in the run.
        name: Case name.
        passed: Whether all checks held.
        failure: Failure message when not passed.
        transient: Whether the failure was a transport error.
        duration_ms: Wall time spent in the case.
    """

    order: int
    name: str
    passed: bool
    failure: str | None = None
    transient: bool = False
    duration_ms: float = 0.0


@dataclass(slots=True)
class SuiteReport:
    """Outcomes of one run, in execution order."""

    outcomes: list[CaseOutcome] = field(default_factory=list)

    @property
    def passed(self) -> list[CaseOutcome]:
        return [outcome for outcome in self.outcomes if outcome.passed]

    @property
    def failed(self) -> list[CaseOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    @property
    def all_passed(self) -> bool:
        return bool(self.outcomes) and not self.failed


class StorySuiteRunner:
    """Runs cases in order against one session.

    Attributes:
        _cases: Cases to run, already in execution order.
        _logger: Console adapter receiving one event per case.
    """

    def __init__(
        self,
        cases: Sequence[StoryCase] = STORY_CASES,
        *,
        logger: ConsoleAdapter | None = None,
    ) -> None:
        self._cases = tuple(sorted(cases, key=lambda case: case.order))
        self._logger = logger if logger is not None else ConsoleAdapter()

    def run(self, session: StorySession) -> SuiteReport:
        """Run every case once and collect the outcomes.

        Args:
            session: Authenticated session, owned by the caller.

        Returns:
            SuiteReport: One outcome per case, in order.
        """
        context = StoryRunContext(api=session.api)
        report = SuiteReport()

        for case in self._cases:
            outcome = self._run_case(case, context)
            report.outcomes.append(outcome)

        self._logger.info(
            "story_suite_completed",
            passed=len(report.passed),
            failed=len(report.failed),
        )
        return report

    def _run_case(self, case: StoryCase, context: StoryRunContext) -> CaseOutcome:
        case_logger = self._logger.bind(case=case.name, order=case.order)
        case_logger.debug("story_case_started")
        started = time.perf_counter()
        try:
            case.run(context)
        except AssertionError as e:
            duration_ms = (time.perf_counter() - started) * 1000
            transient = getattr(e, "transient", False)
            case_logger.warning("story_case_failed", reason=str(e), transient=transient)
            return CaseOutcome(
                order=case.order,
                name=case.name,
                passed=False,
                failure=str(e),
                transient=transient,
                duration_ms=duration_ms,
            )
        except Exception as e:
            case_logger.error("story_case_crashed", error=e)
            raise

        duration_ms = (time.perf_counter() - started) * 1000
        case_logger.info("story_case_passed", duration_ms=round(duration_ms, 1))
        return CaseOutcome(
            order=case.order,
            name=case.name,
            passed=True,
            duration_ms=duration_ms,
        )


def run_story_suite(
    settings: Settings,
    *,
    transport: httpx.BaseTransport | None = None,
    cases: Sequence[StoryCase] = STORY_CASES,
) -> SuiteReport:
    """Configure logging, open a session, run all cases, and close the session.

    Raises:
        SessionSetupError: If login fails.
    """
    console = configure_logging(settings)
    with open_story_session(settings, transport=transport, logger=console) as session:
        return StorySuiteRunner(cases, logger=console).run(session)
