"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for live UI tests, providing fixtures for
browser management, per-test sessions and page objects.

Live tests reach the public demo site and only run when UI_LIVE=1.

Key Features:
- Browser lifecycle management (one launch per pytest session)
- Fresh browser context per test
- Page Object factory fixture
- Screenshot capture on failure

================================================================================
"""

import os
from typing import Generator

import pytest

from autotest_tools.common import init_logger
from autotest_tools.report_tools.allure_utils import attach_failure_screenshot
from testsuites.ui_testing.framework.browser_manager import BrowserManager, Session
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.pages import Pages


def _live_enabled() -> bool:
    return os.getenv("UI_LIVE", "").lower() in ("1", "true", "yes")


def pytest_collection_modifyitems(config, items):
    """Skip live UI tests unless UI_LIVE is set."""
    if _live_enabled():
        return
    skip_live = pytest.mark.skip(reason="Live UI tests disabled (set UI_LIVE=1)")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def suite_config() -> SuiteConfig:
    init_logger()
    return SuiteConfig.from_global_config()


@pytest.fixture(scope="session")
def browser_manager(suite_config: SuiteConfig) -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single launched browser for all tests in the session,
    reducing browser launch overhead.
    """
    manager = BrowserManager.from_config(suite_config)
    manager.start()
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def session(browser_manager: BrowserManager) -> Generator[Session, None, None]:
    """
    Function-scoped session fixture.

    Creates a new browser context for each test, providing isolation.
    """
    with browser_manager.session() as session:
        yield session


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def pages(session: Session, suite_config: SuiteConfig) -> Pages:
    return Pages(session, suite_config)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Hook to capture screenshots on test failure.

    Takes a screenshot when a UI test that owns a session fails and attaches
    it to the Allure report.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        if hasattr(item, "funcargs") and "session" in item.funcargs:
            attach_failure_screenshot(item.funcargs["session"].page, name="failure_screenshot")
