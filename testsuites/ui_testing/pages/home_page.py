"""
================================================================================
Home Page Object
================================================================================

Landing page shown after a successful login: signed-in identity and logout.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class HomePage:
    """Home/landing page object."""

    ACCOUNT_IDENTITY = by_css("account_identity", "[data-testid='account-email'], .account .email")
    LOGOUT_LINK = by_css("logout_link", "a.logout, a[href*='logout']")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    def is_logged_in(self) -> bool:
        """A logout affordance is rendered only for a signed-in user."""
        return self.actions.is_visible(self.LOGOUT_LINK)

    def logged_in_identity(self) -> str:
        return self.actions.read_text(self.ACCOUNT_IDENTITY)

    @allure.step("Logout")
    def log_out(self) -> None:
        self.actions.click_robust(self.LOGOUT_LINK).raise_for_failure()
        self.navigation.wait_document_ready()
        logger.info("Logged out")
