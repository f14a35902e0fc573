"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Guru99 demo site.

Components:
    - locators: Named element descriptions (css / xpath / id / text)
    - wait_engine: Polling wait with satisfied/timeout outcomes
    - element_actions: Element, navigation and cookie interactions
    - browser_manager: Browser lifecycle and per-case sessions
    - suite_state: Facts shared along the dependency chain
    - orchestrator: Ordered case execution and suite report

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, Session
from .element_actions import ClickOutcome, CookieActions, ElementActions, NavigationActions
from .errors import (
    CaseSkipped,
    DependencyUnmetError,
    ElementNotFoundError,
    InteractableError,
    UITestError,
    WaitTimeoutError,
)
from .locators import Locator, by_css, by_id, by_text, by_xpath
from .orchestrator import (
    CaseContext,
    CaseError,
    CaseResult,
    CaseStatus,
    SuiteReport,
    TestCase,
    TestOrchestrator,
)
from .suite_config import SuiteConfig
from .suite_state import SharedTestState
from .wait_engine import WaitCondition, WaitEngine, WaitOutcome

__all__ = [
    "BrowserManager",
    "Session",
    "ClickOutcome",
    "CookieActions",
    "ElementActions",
    "NavigationActions",
    "CaseSkipped",
    "DependencyUnmetError",
    "ElementNotFoundError",
    "InteractableError",
    "UITestError",
    "WaitTimeoutError",
    "Locator",
    "by_css",
    "by_id",
    "by_text",
    "by_xpath",
    "CaseContext",
    "CaseError",
    "CaseResult",
    "CaseStatus",
    "SuiteReport",
    "TestCase",
    "TestOrchestrator",
    "SuiteConfig",
    "SharedTestState",
    "WaitCondition",
    "WaitEngine",
    "WaitOutcome",
]
