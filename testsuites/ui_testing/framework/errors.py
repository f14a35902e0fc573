"""
================================================================================
UI Framework Errors
================================================================================

Exception hierarchy shared by the wait engine, element actions, page objects
and the suite orchestrator.

Every error carries a ``kind`` used as the error descriptor in suite reports.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class UITestError(Exception):
    """Base exception for all UI framework failures."""

    kind: str = "Error"


class ElementNotFoundError(UITestError):
    """No element matched the locator within the timeout."""

    kind = "ElementNotFound"


class WaitTimeoutError(UITestError):
    """Element matched, but the awaited condition was never reached."""

    kind = "Timeout"

    def __init__(self, description: str, elapsed: float = 0.0, last_error: Optional[str] = None):
        self.description = description
        self.elapsed = elapsed
        self.last_error = last_error
        message = f"Timeout after {elapsed:.1f}s waiting for: {description}"
        if last_error:
            message += f" (last error: {last_error})"
        super().__init__(message)


class InteractableError(UITestError):
    """Element was found but could not be operated."""

    kind = "Interactable"


class DependencyUnmetError(UITestError):
    """A dependency-chain prerequisite did not complete."""

    kind = "DependencyUnmet"

    def __init__(self, case_id: str, dependency: str):
        self.case_id = case_id
        self.dependency = dependency
        super().__init__(
            f"DEPENDENCY FAILED: {dependency} must complete successfully before {case_id}"
        )


class CaseSkipped(Exception):
    """Raised by a case body to report an environment condition outside its control."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


# Interaction failures a best-effort case may convert into a skip
INTERACTION_ERRORS = (ElementNotFoundError, WaitTimeoutError, InteractableError)


def error_kind(exc: BaseException) -> str:
    """Map an exception raised by a case body to its report kind."""
    if isinstance(exc, UITestError):
        return exc.kind
    if isinstance(exc, AssertionError):
        return "AssertionFailed"
    return "Error"


__all__ = [
    "UITestError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "InteractableError",
    "DependencyUnmetError",
    "CaseSkipped",
    "INTERACTION_ERRORS",
    "error_kind",
]
