# ================================================================================
# Wait Engine Module
# ================================================================================
#
# This module bridges synchronous test code with an asynchronously rendering
# page. It polls a condition against the live page until the condition is
# satisfied or the timeout elapses.
#
# Key Features:
#   - Returns on the first satisfied evaluation (no fixed sleeps)
#   - Transient errors (detached element, not rendered yet) count as "not yet"
#   - Distinguishes "nothing matched" (ElementNotFound) from "state never
#     reached" (Timeout)
#   - Reusable condition factories for common page states
#
# Usage:
#   engine = WaitEngine(page, timeout=10, poll_interval=0.25)
#   engine.until(document_ready())
#   engine.until(class_token_present(menu_item, "open"))
#
# ================================================================================

import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from .errors import ElementNotFoundError, InteractableError, WaitTimeoutError
from .locators import Locator


# Errors raised by a condition that mean "not satisfied yet"
TRANSIENT_ERRORS = (PlaywrightError, ElementNotFoundError, InteractableError)


@dataclass(frozen=True)
class WaitCondition:
    """
    Predicate over the current page.

    Attributes:
        description: Human-readable description used in logs and timeouts
        probe: Callable receiving the page; returns a truthy value when
            satisfied, a falsy value when not yet, or raises
    """
    description: str
    probe: Callable[[Any], Any]

    def evaluate(self, page: Any) -> Any:
        return self.probe(page)


@dataclass
class WaitOutcome:
    """Result of a single await_condition call."""
    satisfied: bool
    value: Any = None
    elapsed: float = 0.0
    attempts: int = 0
    last_error: Optional[BaseException] = None


class WaitEngine:
    """
    Polls WaitConditions against a page.

    Args:
        page: Page the conditions are evaluated against
        timeout: Default timeout in seconds
        poll_interval: Default polling interval in seconds
    """

    def __init__(self, page: Any = None, timeout: float = 10.0, poll_interval: float = 0.25):
        self.page = page
        self.timeout = timeout
        self.poll_interval = poll_interval

    def await_condition(
        self,
        condition: WaitCondition,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> WaitOutcome:
        """
        Poll a condition until it is satisfied or the timeout elapses.

        Args:
            condition: Condition to evaluate
            timeout: Timeout in seconds (engine default if None)
            poll_interval: Polling interval in seconds (engine default if None)

        Returns:
            WaitOutcome with satisfied=False when the timeout elapsed
        """
        timeout = self.timeout if timeout is None else timeout
        poll_interval = self.poll_interval if poll_interval is None else poll_interval

        start_time = time.monotonic()
        deadline = start_time + timeout
        attempts = 0
        last_error: Optional[BaseException] = None

        while True:
            attempts += 1
            try:
                value = condition.evaluate(self.page)
                if value:
                    elapsed = time.monotonic() - start_time
                    logger.debug(
                        f"Condition met after {attempts} attempts ({elapsed:.2f}s): "
                        f"{condition.description}"
                    )
                    return WaitOutcome(True, value, elapsed, attempts, None)
                # not ready yet, but earlier lookup errors no longer apply
                last_error = None
            except TRANSIENT_ERRORS as e:
                last_error = e

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return WaitOutcome(
                    False, None, time.monotonic() - start_time, attempts, last_error
                )
            time.sleep(min(poll_interval, remaining))

    def until(
        self,
        condition: WaitCondition,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> Any:
        """
        Wait for a condition and return its satisfied value.

        Raises:
            ElementNotFoundError: The element the condition needs never matched
            WaitTimeoutError: The condition was never satisfied
        """
        outcome = self.await_condition(condition, timeout, poll_interval)
        if outcome.satisfied:
            return outcome.value

        if isinstance(outcome.last_error, ElementNotFoundError):
            logger.error(f"Element not found after {outcome.elapsed:.1f}s: {condition.description}")
            raise ElementNotFoundError(
                f"{outcome.last_error} (waited {outcome.elapsed:.1f}s for: {condition.description})"
            )

        last_error = str(outcome.last_error) if outcome.last_error else None
        logger.error(f"Timeout after {outcome.elapsed:.1f}s waiting for: {condition.description}")
        raise WaitTimeoutError(condition.description, outcome.elapsed, last_error)


# =============================================================================
# Condition Factories
# =============================================================================

def _first_match(page: Any, locator: Locator) -> Any:
    matches = page.locator(locator.selector)
    if matches.count() == 0:
        raise ElementNotFoundError(f"No element matched {locator}")
    return matches.first


def element_present(locator: Locator) -> WaitCondition:
    """Element is attached to the DOM. Satisfied value is the handle."""
    return WaitCondition(
        f"{locator.name} present",
        lambda page: _first_match(page, locator),
    )


def element_visible(locator: Locator) -> WaitCondition:
    """Element is attached and visible. Satisfied value is the handle."""

    def probe(page: Any) -> Any:
        handle = _first_match(page, locator)
        return handle if handle.is_visible() else None

    return WaitCondition(f"{locator.name} visible", probe)


def element_clickable(locator: Locator) -> WaitCondition:
    """Element is visible and enabled. Satisfied value is the handle."""

    def probe(page: Any) -> Any:
        handle = _first_match(page, locator)
        return handle if handle.is_visible() and handle.is_enabled() else None

    return WaitCondition(f"{locator.name} clickable", probe)


def document_ready() -> WaitCondition:
    """document.readyState is 'complete'."""
    return WaitCondition(
        "document ready state is complete",
        lambda page: page.evaluate("document.readyState") == "complete",
    )


def attribute_contains(locator: Locator, attribute: str, substring: str) -> WaitCondition:
    """Element attribute contains a substring (e.g. class list contains 'open')."""

    def probe(page: Any) -> bool:
        value = _first_match(page, locator).get_attribute(attribute) or ""
        return substring in value

    return WaitCondition(f"{locator.name} [{attribute}] contains '{substring}'", probe)


def class_token_present(locator: Locator, token: str) -> WaitCondition:
    """Element class list holds the token as a whole word."""

    def probe(page: Any) -> bool:
        classes = _first_match(page, locator).get_attribute("class") or ""
        return token in classes.split()

    return WaitCondition(f"{locator.name} has class '{token}'", probe)


def text_contains(locator: Locator, substring: str) -> WaitCondition:
    """Element text contains a substring. Satisfied value is the text."""

    def probe(page: Any) -> Optional[str]:
        text = _first_match(page, locator).text_content() or ""
        return text.strip() if substring in text else None

    return WaitCondition(f"{locator.name} text contains '{substring}'", probe)


def url_contains(fragment: str) -> WaitCondition:
    """Current URL contains a fragment. Satisfied value is the URL."""

    def probe(page: Any) -> Optional[str]:
        url = page.url or ""
        return url if fragment in url else None

    return WaitCondition(f"URL contains '{fragment}'", probe)


def title_contains_any(keywords: Iterable[str]) -> WaitCondition:
    """Page title contains at least one keyword. Satisfied value is the title."""
    keywords = tuple(keywords)

    def probe(page: Any) -> Optional[str]:
        title = page.title() or ""
        return title if any(k in title for k in keywords) else None

    return WaitCondition(f"title contains one of {list(keywords)}", probe)


__all__ = [
    "TRANSIENT_ERRORS",
    "WaitCondition",
    "WaitOutcome",
    "WaitEngine",
    "element_present",
    "element_visible",
    "element_clickable",
    "document_ready",
    "attribute_contains",
    "class_token_present",
    "text_contains",
    "url_contains",
    "title_contains_any",
]
