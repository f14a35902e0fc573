from unittest.mock import MagicMock

import pytest

from testsuites.ui_testing.framework import browser_manager as browser_manager_module
from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.unit.fakes import playwright_error


@pytest.fixture
def playwright(monkeypatch):
    driver = MagicMock(name="playwright")
    starter = MagicMock(name="sync_playwright")
    starter.return_value.start.return_value = driver
    monkeypatch.setattr(browser_manager_module, "sync_playwright", starter)
    return driver


def test_launches_configured_browser(playwright):
    manager = BrowserManager.from_config(SuiteConfig(browser="firefox", headless=False))

    manager.start()
    manager.start()

    playwright.firefox.launch.assert_called_once()
    assert playwright.firefox.launch.call_args.kwargs["headless"] is False
    playwright.chromium.launch.assert_not_called()


def test_each_session_gets_fresh_context(playwright):
    manager = BrowserManager(timeout=7.0)
    browser = playwright.chromium.launch.return_value
    browser.new_context.side_effect = lambda **options: MagicMock(name="context")

    first = manager.acquire()
    second = manager.acquire()

    assert first.context is not second.context
    assert first.session_id != second.session_id
    assert manager.active_sessions == 2
    first.page.set_default_timeout.assert_called_once_with(7000.0)
    assert first.actions.wait.timeout == 7.0


def test_session_released_when_body_raises(playwright):
    manager = BrowserManager()

    with pytest.raises(AssertionError):
        with manager.session() as session:
            assert False, "case body failed"

    session.context.close.assert_called_once()
    assert manager.active_sessions == 0


def test_release_is_idempotent(playwright):
    manager = BrowserManager()
    session = manager.acquire()

    manager.release(session)
    manager.release(session)

    session.context.close.assert_called_once()


def test_release_survives_close_error(playwright):
    manager = BrowserManager()
    session = manager.acquire()
    session.context.close.side_effect = playwright_error("Target closed")

    manager.release(session)

    assert manager.active_sessions == 0


def test_close_releases_leftovers_and_stops(playwright):
    with BrowserManager() as manager:
        manager.acquire()

    browser = playwright.chromium.launch.return_value
    browser.close.assert_called_once()
    playwright.stop.assert_called_once()
    assert manager.active_sessions == 0
