"""
Fixtures for framework unit tests (no browser, no network).
"""

import pytest

from testsuites.ui_testing.framework import wait_engine
from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.framework.wait_engine import WaitEngine
from testsuites.unit.fakes import FakeClock, FakePage


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    """Virtual time for the wait engine; waits finish instantly."""
    fake = FakeClock()
    monkeypatch.setattr(wait_engine, "time", fake)
    return fake


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def engine(page, clock) -> WaitEngine:
    return WaitEngine(page, timeout=5.0, poll_interval=0.25)


@pytest.fixture
def actions(page, engine) -> ElementActions:
    return ElementActions(page, engine, native_click_timeout=1.0)


@pytest.fixture
def navigation(page, engine) -> NavigationActions:
    return NavigationActions(page, engine)


@pytest.fixture
def suite_config() -> SuiteConfig:
    return SuiteConfig(base_url="https://demo.example.test")
