"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle management for UI automation.

Features:
    - One isolated session (browser context + page) per test case
    - Guaranteed release on every exit path
    - No pooling: every acquire starts from clean cookies and history
    - Browser configuration presets

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Page,
    Playwright,
    sync_playwright,
)

from .element_actions import CookieActions, ElementActions, NavigationActions
from .suite_config import SuiteConfig
from .wait_engine import WaitEngine


@dataclass
class Session:
    """
    One live automation handle, owned by a single test case.

    Attributes:
        context: Isolated browser context (cookies, storage, history)
        page: The context's page
        actions: Element interactions bound to the page
        navigation: Navigation stack operations
        cookies: Cookie operations on the context
    """
    context: BrowserContext
    page: Page
    actions: ElementActions
    navigation: NavigationActions
    cookies: CookieActions
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])


class BrowserManager:
    """
    Manages the browser and hands out one session per test case.

    Usage:
        with BrowserManager(headless=True) as manager:
            with manager.session() as session:
                session.navigation.navigate("https://example.com")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
            "--disable-notifications",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: bool = True,
        browser_type: str = "chromium",
        timeout: float = 10.0,
        poll_interval: float = 0.25,
        native_click_timeout: float = 2.0,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode
            browser_type: Browser to use - 'chromium', 'firefox', 'webkit'
            timeout: Default wait timeout in seconds for every session
            poll_interval: Default wait polling interval in seconds
            native_click_timeout: Seconds before a native click counts as blocked
        """
        self.headless = headless
        self.browser_type = browser_type
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.native_click_timeout = native_click_timeout

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._active: Dict[str, Session] = {}

    @classmethod
    def from_config(cls, config: SuiteConfig) -> "BrowserManager":
        return cls(
            headless=config.headless,
            browser_type=config.browser,
            timeout=config.timeout,
            poll_interval=config.poll_interval,
            native_click_timeout=config.native_click_timeout,
        )

    def __enter__(self) -> "BrowserManager":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> None:
        """Start Playwright and launch browser."""
        if self._browser is not None:
            return
        self._playwright = sync_playwright().start()

        # Select browser type
        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        self._browser = browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    def close(self) -> None:
        """Release any leftover sessions and close the browser."""
        for session in list(self._active.values()):
            self.release(session)

        if self._browser:
            self._browser.close()
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def acquire(self) -> Session:
        """
        Create a fresh session.

        Each session gets its own browser context, so cookies and navigation
        history never leak between test cases.
        """
        self.start()

        context = self._browser.new_context(**self.DEFAULT_CONTEXT_OPTIONS)
        page = context.new_page()
        page.set_default_timeout(self.timeout * 1000)

        wait = WaitEngine(page, timeout=self.timeout, poll_interval=self.poll_interval)
        session = Session(
            context=context,
            page=page,
            actions=ElementActions(page, wait, native_click_timeout=self.native_click_timeout),
            navigation=NavigationActions(page, wait),
            cookies=CookieActions(context, page),
        )
        self._active[session.session_id] = session
        logger.debug(f"Session acquired: {session.session_id}")
        return session

    def release(self, session: Session) -> None:
        """Close the session's context. Safe to call on an already released session."""
        if self._active.pop(session.session_id, None) is None:
            return
        try:
            session.context.close()
        except PlaywrightError as e:
            logger.warning(f"Failed to close session {session.session_id}: {e}")
        logger.debug(f"Session released: {session.session_id}")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Scoped acquisition; the session is released on every exit path."""
        session = self.acquire()
        try:
            yield session
        finally:
            self.release(session)

    @property
    def active_sessions(self) -> int:
        return len(self._active)


__all__ = [
    "Session",
    "BrowserManager",
]
