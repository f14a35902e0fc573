"""
================================================================================
History Page Object
================================================================================

Exercises the session's navigation stack with two known pages.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.framework.wait_engine import url_contains


class HistoryPage:
    """Browser history page object."""

    FIRST_PATH = "/test/login.html"
    SECOND_PATH = "/test/radio.html"

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Visit first page")
    def visit_first(self) -> None:
        self.navigation.navigate(self.config.url(self.FIRST_PATH))

    @allure.step("Visit second page")
    def visit_second(self) -> None:
        self.navigation.navigate(self.config.url(self.SECOND_PATH))

    @allure.step("Browser back")
    def go_back(self) -> None:
        self.navigation.back()

    @allure.step("Browser forward")
    def go_forward(self) -> None:
        self.navigation.forward()

    @allure.step("Browser refresh")
    def refresh(self) -> None:
        self.navigation.refresh()

    def is_on_first(self) -> bool:
        return self.actions.check(url_contains(self.FIRST_PATH))

    def is_on_second(self) -> bool:
        return self.actions.check(url_contains(self.SECOND_PATH))
