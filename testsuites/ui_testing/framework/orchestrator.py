# ================================================================================
# Test Orchestrator Module
# ================================================================================
#
# Runs UI test cases in a fixed order, one session per case, and enforces the
# dependency chain between the few cases that share state.
#
# Key Features:
#   - Total execution order fixed at build time (lexical by case id)
#   - Dependency check against SharedTestState before a dependent case runs;
#     an unmet dependency fails the case without invoking its body or
#     touching the browser
#   - Explicit skip escape hatch for independent cases, refused for
#     dependency-chain cases
#   - Best-effort conversion of interaction failures, limited to cases
#     registered as best-effort
#   - SuiteReport with per-case terminal state and error descriptor
#
# Usage:
#   orchestrator = TestOrchestrator(BrowserManager(), config, pages_factory=Pages)
#
#   @orchestrator.case("test_a1_user_registration", completion_flag="registration_completed")
#   def registration(ctx):
#       ...
#
#   report = orchestrator.run_suite()
#
# ================================================================================

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from autotest_tools.report_tools.allure_utils import attach_failure_screenshot

from .errors import (
    INTERACTION_ERRORS,
    CaseSkipped,
    DependencyUnmetError,
    error_kind,
)
from .suite_config import SuiteConfig
from .suite_state import COMPLETION_FLAGS, SharedTestState


class CaseStatus(str, Enum):
    """Lifecycle of one test case."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


TERMINAL_STATUSES = frozenset({CaseStatus.PASSED, CaseStatus.FAILED, CaseStatus.SKIPPED})

_ALLOWED_TRANSITIONS = {
    CaseStatus.PENDING: frozenset({CaseStatus.RUNNING, CaseStatus.FAILED}),
    CaseStatus.RUNNING: TERMINAL_STATUSES,
}


@dataclass
class CaseError:
    """Error descriptor of a failed case."""
    kind: str
    message: str
    related_dependency: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "related_dependency": self.related_dependency,
        }


@dataclass
class TestCase:
    """
    A registered suite case.

    Attributes:
        case_id: Unique identifier; also the execution order key
        body: Callable receiving a CaseContext
        depends_on: Case ids whose completion flags must be set first
        completion_flag: SharedTestState flag this case owns, if any
        best_effort: Interaction failures inside ctx.best_effort() become skips
        description: Human-readable summary
    """
    __test__ = False

    case_id: str
    body: Callable[["CaseContext"], None]
    depends_on: Tuple[str, ...] = ()
    completion_flag: Optional[str] = None
    best_effort: bool = False
    description: str = ""

    @property
    def order_key(self) -> str:
        return self.case_id

    @property
    def is_chain_case(self) -> bool:
        """Part of the dependency chain, either as producer or consumer."""
        return bool(self.depends_on) or self.completion_flag is not None


@dataclass
class CaseResult:
    """Outcome of one case in a suite run."""
    case_id: str
    status: CaseStatus = CaseStatus.PENDING
    error: Optional[CaseError] = None
    duration: float = 0.0
    skip_reason: Optional[str] = None

    def transition(self, status: CaseStatus) -> None:
        allowed = _ALLOWED_TRANSITIONS.get(self.status, frozenset())
        if status not in allowed:
            raise RuntimeError(
                f"Illegal state transition for {self.case_id}: {self.status.value} -> {status.value}"
            )
        self.status = status

    def fail(self, error: CaseError) -> None:
        self.transition(CaseStatus.FAILED)
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "case_id": self.case_id,
            "status": self.status.value,
            "error": self.error.to_dict() if self.error else None,
            "skip_reason": self.skip_reason,
            "duration": round(self.duration, 3),
        }


@dataclass
class SuiteReport:
    """Terminal state of every executed case, in execution order."""
    results: List[CaseResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    duration: float = 0.0
    state: Optional[SharedTestState] = None

    def _with_status(self, status: CaseStatus) -> List[CaseResult]:
        return [r for r in self.results if r.status == status]

    @property
    def passed(self) -> List[CaseResult]:
        return self._with_status(CaseStatus.PASSED)

    @property
    def failed(self) -> List[CaseResult]:
        return self._with_status(CaseStatus.FAILED)

    @property
    def skipped(self) -> List[CaseResult]:
        return self._with_status(CaseStatus.SKIPPED)

    @property
    def success(self) -> bool:
        return not self.failed

    def get(self, case_id: str) -> CaseResult:
        for result in self.results:
            if result.case_id == case_id:
                return result
        raise KeyError(case_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "started_at": self.started_at.isoformat(),
            "duration": round(self.duration, 3),
            "total": len(self.results),
            "passed": len(self.passed),
            "failed": len(self.failed),
            "skipped": len(self.skipped),
            "cases": [r.to_dict() for r in self.results],
            "state": self.state.to_dict() if self.state else None,
        }


class CaseContext:
    """
    Everything a case body may touch: its session, the shared suite state,
    configuration and page objects.
    """

    def __init__(
        self,
        case: TestCase,
        session: Any,
        state: SharedTestState,
        config: SuiteConfig,
        pages_factory: Optional[Callable[[Any, SuiteConfig], Any]] = None,
    ):
        self.case = case
        self.session = session
        self.state = state
        self.config = config
        self._pages_factory = pages_factory
        self._pages = None

    @property
    def pages(self) -> Any:
        if self._pages is None:
            if self._pages_factory is None:
                raise RuntimeError("No page factory configured for this orchestrator")
            self._pages = self._pages_factory(self.session, self.config)
        return self._pages

    def skip(self, reason: str) -> None:
        """Report an environment condition outside this case's control."""
        raise CaseSkipped(reason)

    @contextmanager
    def best_effort(self, reason: str) -> Iterator[None]:
        """
        Convert interaction failures of an optional affordance into a skip.

        Only cases registered with best_effort=True get the conversion; for
        any other case the original error propagates unchanged.
        """
        try:
            yield
        except INTERACTION_ERRORS as e:
            if not self.case.best_effort:
                raise
            logger.warning(f"Best-effort step failed in {self.case.case_id}: {e}")
            raise CaseSkipped(f"{reason}: {e}") from e


class TestOrchestrator:
    """
    Sequential suite runner with dependency-chain enforcement.

    Args:
        session_manager: Object exposing a ``session()`` context manager
        config: Suite configuration handed to every case
        pages_factory: Callable (session, config) -> page object factory
    """

    __test__ = False

    def __init__(
        self,
        session_manager: Any,
        config: Optional[SuiteConfig] = None,
        pages_factory: Optional[Callable[[Any, SuiteConfig], Any]] = None,
    ):
        self.session_manager = session_manager
        self.config = config or SuiteConfig()
        self.pages_factory = pages_factory
        self._cases: Dict[str, TestCase] = {}

    # =========================================================================
    # Suite Building
    # =========================================================================

    def register(self, case: TestCase) -> TestCase:
        if case.case_id in self._cases:
            raise ValueError(f"Duplicate test case id: {case.case_id}")
        if case.completion_flag is not None and case.completion_flag not in COMPLETION_FLAGS:
            raise ValueError(
                f"Unknown completion flag '{case.completion_flag}' for {case.case_id}"
            )
        self._cases[case.case_id] = case
        return case

    def case(
        self,
        case_id: str,
        depends_on: Iterable[str] = (),
        completion_flag: Optional[str] = None,
        best_effort: bool = False,
        description: Optional[str] = None,
    ) -> Callable[[Callable[[CaseContext], None]], Callable[[CaseContext], None]]:
        """Decorator registering a function as a test case body."""

        def decorator(body: Callable[[CaseContext], None]) -> Callable[[CaseContext], None]:
            self.register(
                TestCase(
                    case_id=case_id,
                    body=body,
                    depends_on=tuple(depends_on),
                    completion_flag=completion_flag,
                    best_effort=best_effort,
                    description=description or (body.__doc__ or "").strip().split("\n")[0],
                )
            )
            return body

        return decorator

    @property
    def cases(self) -> List[TestCase]:
        """Registered cases in execution order."""
        return sorted(self._cases.values(), key=lambda c: c.order_key)

    def validate(self) -> None:
        """
        Check the dependency graph.

        Raises:
            ValueError: Unknown dependency, dependency without a completion
                flag, or dependency ordered after its dependent
        """
        for case in self._cases.values():
            for dependency_id in case.depends_on:
                dependency = self._cases.get(dependency_id)
                if dependency is None:
                    raise ValueError(f"{case.case_id} depends on unknown case {dependency_id}")
                if dependency.completion_flag is None:
                    raise ValueError(
                        f"{case.case_id} depends on {dependency_id}, which records no completion flag"
                    )
                if dependency.order_key >= case.order_key:
                    raise ValueError(
                        f"{case.case_id} depends on {dependency_id}, which does not run earlier"
                    )

    # =========================================================================
    # Execution
    # =========================================================================

    def run_suite(self, only: Optional[Iterable[str]] = None) -> SuiteReport:
        """
        Execute registered cases in order.

        Args:
            only: Optional subset of case ids; order and dependency checks
                still apply

        Returns:
            SuiteReport with one entry per executed case
        """
        self.validate()
        selected = set(only) if only is not None else None
        if selected is not None:
            unknown = selected - set(self._cases)
            if unknown:
                raise ValueError(f"Unknown test case ids: {sorted(unknown)}")

        state = SharedTestState()
        report = SuiteReport(state=state)
        start_time = time.monotonic()

        logger.info("=" * 60)
        logger.info("TEST SUITE STARTING")
        for case in self.cases:
            if case.depends_on:
                logger.info(f"  {case.case_id} (depends on {' -> '.join(case.depends_on)})")
        logger.info("=" * 60)

        for case in self.cases:
            if selected is not None and case.case_id not in selected:
                continue
            report.results.append(self._run_case(case, state))

        report.duration = time.monotonic() - start_time
        logger.info(
            f"Suite finished: {len(report.passed)} passed, {len(report.failed)} failed, "
            f"{len(report.skipped)} skipped ({report.duration:.1f}s)"
        )
        return report

    def _run_case(self, case: TestCase, state: SharedTestState) -> CaseResult:
        result = CaseResult(case.case_id)

        unmet = self._first_unmet_dependency(case, state)
        if unmet is not None:
            error = DependencyUnmetError(case.case_id, unmet)
            result.fail(CaseError(error.kind, str(error), unmet))
            logger.error(f"✗ {case.case_id}: {error}")
            return result

        result.transition(CaseStatus.RUNNING)
        logger.info(f"=== {case.case_id}: starting ===")
        prior_flag = state.is_completed(case.completion_flag) if case.completion_flag else None
        start_time = time.monotonic()

        try:
            with self.session_manager.session() as session:
                context = CaseContext(case, session, state, self.config, self.pages_factory)
                try:
                    case.body(context)
                except CaseSkipped:
                    raise
                except Exception:
                    self._capture_failure(session, case)
                    raise
        except CaseSkipped as e:
            if case.is_chain_case:
                result.fail(CaseError(
                    "AssertionFailed",
                    f"Dependency-chain case cannot be skipped: {e.reason}",
                ))
            else:
                result.transition(CaseStatus.SKIPPED)
                result.skip_reason = e.reason
                logger.warning(f"↷ {case.case_id} skipped: {e.reason}")
        except Exception as e:
            result.fail(CaseError(error_kind(e), str(e) or type(e).__name__))
        else:
            result.transition(CaseStatus.PASSED)
            logger.info(f"✓ {case.case_id} passed")
            if case.completion_flag and not state.is_completed(case.completion_flag):
                logger.warning(f"{case.case_id} passed without recording {case.completion_flag}")

        if result.status == CaseStatus.FAILED:
            if case.completion_flag:
                setattr(state, case.completion_flag, prior_flag)
            logger.error(f"✗ {case.case_id} failed [{result.error.kind}]: {result.error.message}")

        result.duration = time.monotonic() - start_time
        return result

    def _first_unmet_dependency(self, case: TestCase, state: SharedTestState) -> Optional[str]:
        for dependency_id in case.depends_on:
            flag = self._cases[dependency_id].completion_flag
            if not state.is_completed(flag):
                return dependency_id
        return None

    def _capture_failure(self, session: Any, case: TestCase) -> None:
        page = getattr(session, "page", None)
        if page is not None:
            attach_failure_screenshot(page, f"failure_{case.case_id}")


__all__ = [
    "CaseStatus",
    "CaseError",
    "TestCase",
    "CaseResult",
    "SuiteReport",
    "CaseContext",
    "TestOrchestrator",
]
