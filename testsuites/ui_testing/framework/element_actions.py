# ================================================================================
# Element Actions Module
# ================================================================================
#
# This module provides the UI element interaction layer every page object is
# built from. Each interaction first waits for the element to be ready via the
# WaitEngine, then operates it through Playwright.
#
# Key Features:
#   - Readiness waits before every interaction (no fixed sleeps)
#   - Robust click: native click first, script-injected click only after the
#     native path failed once
#   - Idempotent checkbox/radio toggles
#   - Navigation stack and cookie helpers for the current session
#   - Allure step integration
#
# ================================================================================

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError

from .errors import ElementNotFoundError, InteractableError, WaitTimeoutError
from .locators import Locator
from .wait_engine import (
    WaitCondition,
    WaitEngine,
    document_ready,
    element_clickable,
    element_present,
    element_visible,
)


INJECTED_CLICK_SCRIPT = "el => el.click()"


@dataclass
class ClickOutcome:
    """
    Tagged result of a robust click.

    Attributes:
        succeeded: Whether any strategy delivered the click
        via: 'native' or 'injected' when succeeded
        last_error: Error of the last failed strategy
    """
    succeeded: bool
    via: Optional[str] = None
    last_error: Optional[BaseException] = None

    @classmethod
    def delivered(cls, via: str, previous_error: Optional[BaseException] = None) -> "ClickOutcome":
        return cls(True, via, previous_error)

    @classmethod
    def failed(cls, error: BaseException) -> "ClickOutcome":
        return cls(False, None, error)

    def raise_for_failure(self) -> "ClickOutcome":
        """Re-raise the last error when no strategy delivered the click."""
        if not self.succeeded:
            raise self.last_error
        return self


class ElementActions:
    """
    Readiness-aware element interactions for one session page.

    Example:
        actions = ElementActions(page, WaitEngine(page))
        actions.type_text(email_input, "user@example.com")
        actions.click(submit_button)
        actions.set_checked(newsletter_checkbox, True)
    """

    def __init__(self, page: Any, wait: WaitEngine, native_click_timeout: float = 2.0):
        """
        Initialize ElementActions with a Playwright page.

        Args:
            page: Playwright Page object
            wait: WaitEngine bound to the same page
            native_click_timeout: Seconds a native click may take before it
                counts as not deliverable
        """
        self.page = page
        self.wait = wait
        self.native_click_timeout = native_click_timeout

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve(self, locator: Locator, timeout: Optional[float] = None) -> Any:
        """Resolve a locator to the first attached element."""
        return self.wait.until(element_present(locator), timeout)

    def is_present(self, locator: Locator, timeout: float = 2.0) -> bool:
        """Structural check: does the locator match anything within timeout."""
        return self.wait.await_condition(element_present(locator), timeout).satisfied

    def is_visible(self, locator: Locator, timeout: float = 2.0) -> bool:
        """Check if an element becomes visible within timeout."""
        return self.wait.await_condition(element_visible(locator), timeout).satisfied

    def wait_for(self, condition: WaitCondition, timeout: Optional[float] = None) -> Any:
        """Block until an arbitrary condition holds; raises on timeout."""
        return self.wait.until(condition, timeout)

    def check(self, condition: WaitCondition, timeout: float = 2.0) -> bool:
        """Non-raising variant of wait_for."""
        return self.wait.await_condition(condition, timeout).satisfied

    # =========================================================================
    # Clicks
    # =========================================================================

    @allure.step("Click element: {locator}")
    def click(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """
        Wait until the element is clickable, then issue a native click.

        Raises:
            ElementNotFoundError: Nothing matched within timeout
            WaitTimeoutError: Element never became clickable
            InteractableError: Native click could not be delivered
        """
        logger.info(f"Clicking element: {locator}")
        handle = self.wait.until(element_clickable(locator), timeout)
        self._native_click(handle, locator)
        logger.debug(f"Successfully clicked: {locator}")

    @allure.step("Robust click: {locator}")
    def click_robust(self, locator: Locator, timeout: Optional[float] = None) -> ClickOutcome:
        """
        Click with a script-injected fallback for obscured elements.

        The native path is always tried first; the injected click is only
        attempted after the native click failed once.

        Raises:
            ElementNotFoundError: Nothing matched within timeout
        """
        logger.info(f"Robust click: {locator}")
        self.resolve(locator, timeout)

        native_error = self._try_native(locator)
        if native_error is None:
            return ClickOutcome.delivered("native")

        logger.warning(
            f"Native click not delivered to {locator}: {native_error}. "
            f"Falling back to injected click"
        )
        injected_error = self._try_injected(locator, timeout)
        if injected_error is None:
            return ClickOutcome.delivered("injected", native_error)

        logger.error(f"Injected click failed for {locator}: {injected_error}")
        return ClickOutcome.failed(injected_error)

    def _try_native(self, locator: Locator) -> Optional[BaseException]:
        try:
            handle = self.wait.until(element_clickable(locator), self.native_click_timeout)
            self._native_click(handle, locator)
        except (ElementNotFoundError, WaitTimeoutError, InteractableError) as e:
            return e
        return None

    def _try_injected(self, locator: Locator, timeout: Optional[float]) -> Optional[BaseException]:
        try:
            handle = self.resolve(locator, timeout)
            handle.evaluate(INJECTED_CLICK_SCRIPT)
        except PlaywrightError as e:
            return InteractableError(f"Injected click failed on {locator}: {e}")
        except ElementNotFoundError as e:
            return e
        return None

    def _native_click(self, handle: Any, locator: Locator) -> None:
        try:
            handle.click(timeout=self.native_click_timeout * 1000)
        except PlaywrightError as e:
            raise InteractableError(f"Native click not delivered to {locator}: {e}") from e

    # =========================================================================
    # Toggles
    # =========================================================================

    @allure.step("Set checked={desired}: {locator}")
    def set_checked(self, locator: Locator, desired: bool, timeout: Optional[float] = None) -> None:
        """
        Bring a checkbox/radio to the desired state.

        Reads the current state first and only clicks when it differs, so
        repeated calls with the same desired state are no-ops.
        """
        handle = self.wait.until(element_clickable(locator), timeout)
        current = handle.is_checked()
        if current == desired:
            logger.debug(f"{locator} already {'checked' if desired else 'unchecked'}")
            return

        action = "Checking" if desired else "Unchecking"
        logger.info(f"{action}: {locator}")
        self._native_click(handle, locator)

    def select_if_unselected(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """Select a radio option unless it is already selected."""
        self.set_checked(locator, True, timeout)

    # =========================================================================
    # Reads
    # =========================================================================

    def read_text(self, locator: Locator, timeout: Optional[float] = None) -> str:
        """
        Get visible text content of an element.

        Returns:
            Stripped text content
        """
        handle = self.wait.until(element_visible(locator), timeout)
        text = (handle.text_content() or "").strip()
        logger.debug(f"Got text from {locator}: '{text}'")
        return text

    def read_value(self, locator: Locator, timeout: Optional[float] = None) -> str:
        """Get the current value of an input or textarea."""
        handle = self.wait.until(element_visible(locator), timeout)
        return handle.input_value()

    def is_selected(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """Checked state of a checkbox/radio."""
        return self.resolve(locator, timeout).is_checked()

    def get_attribute(self, locator: Locator, attribute: str, timeout: Optional[float] = None) -> Optional[str]:
        """
        Get attribute value of an element.

        Returns:
            Attribute value or None if the element has no such attribute
        """
        value = self.resolve(locator, timeout).get_attribute(attribute)
        logger.debug(f"Got attribute {attribute} from {locator}: '{value}'")
        return value

    # =========================================================================
    # Input
    # =========================================================================

    @allure.step("Type text: {locator}")
    def type_text(self, locator: Locator, text: str, timeout: Optional[float] = None) -> None:
        """Replace the content of an input with text."""
        shown = "*" * len(text) if "password" in locator.name.lower() else text[:50]
        logger.info(f"Typing into {locator}: '{shown}'")

        handle = self.wait.until(element_visible(locator), timeout)
        try:
            handle.fill(text)
        except PlaywrightError as e:
            raise InteractableError(f"Could not type into {locator}: {e}") from e

    @allure.step("Hover element: {locator}")
    def hover(self, locator: Locator, timeout: Optional[float] = None) -> None:
        logger.info(f"Hovering over: {locator}")
        handle = self.wait.until(element_visible(locator), timeout)
        try:
            handle.hover(timeout=self.native_click_timeout * 1000)
        except PlaywrightError as e:
            raise InteractableError(f"Could not hover {locator}: {e}") from e

    @allure.step("Drag and drop: {source} -> {target}")
    def drag_to(self, source: Locator, target: Locator, timeout: Optional[float] = None) -> None:
        logger.info(f"Dragging from {source} to {target}")
        source_handle = self.wait.until(element_visible(source), timeout)
        target_handle = self.wait.until(element_visible(target), timeout)
        try:
            source_handle.drag_to(target_handle)
        except PlaywrightError as e:
            raise InteractableError(f"Could not drag {source} to {target}: {e}") from e

    @allure.step("Upload file: {locator}")
    def upload_file(self, locator: Locator, file_path: Union[str, List[str]], timeout: Optional[float] = None) -> None:
        logger.info(f"Uploading file to: {locator}")
        handle = self.resolve(locator, timeout)
        try:
            handle.set_input_files(file_path)
        except PlaywrightError as e:
            raise InteractableError(f"Could not upload to {locator}: {e}") from e


class NavigationActions:
    """Navigation stack operations for the session page."""

    def __init__(self, page: Any, wait: WaitEngine):
        self.page = page
        self.wait = wait

    @allure.step("Navigate to {url}")
    def navigate(self, url: str) -> None:
        """Open a URL and wait for the document to be ready."""
        self.page.goto(url, wait_until="domcontentloaded")
        self.wait_document_ready()
        logger.debug(f"Navigated to: {url}")

    def back(self) -> None:
        self.page.go_back(wait_until="domcontentloaded")
        self.wait_document_ready()

    def forward(self) -> None:
        self.page.go_forward(wait_until="domcontentloaded")
        self.wait_document_ready()

    def refresh(self) -> None:
        self.page.reload(wait_until="domcontentloaded")
        self.wait_document_ready()

    def wait_document_ready(self, timeout: Optional[float] = None) -> None:
        self.wait.until(document_ready(), timeout)

    @property
    def current_url(self) -> str:
        return self.page.url or ""

    def title(self) -> str:
        return self.page.title() or ""


class CookieActions:
    """Cookie read/write for the session's browser context."""

    def __init__(self, context: Any, page: Any):
        self.context = context
        self.page = page

    def all(self) -> List[Dict[str, Any]]:
        return self.context.cookies()

    def add(self, name: str, value: str, url: Optional[str] = None) -> None:
        logger.info(f"Adding cookie: {name}")
        self.context.add_cookies([{"name": name, "value": value, "url": url or self.page.url}])

    def get(self, name: str) -> Optional[str]:
        for cookie in self.context.cookies():
            if cookie["name"] == name:
                return cookie["value"]
        return None

    def clear(self) -> None:
        logger.info("Deleting all cookies")
        self.context.clear_cookies()


__all__ = [
    "ClickOutcome",
    "ElementActions",
    "NavigationActions",
    "CookieActions",
]
