"""
================================================================================
Registration Page Object
================================================================================

Account registration form. On success the application lands on a
login-capable page; confirming that is the caller's job.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class RegisterPage:
    """Registration page object."""

    URL_PATH = "/test/newtours/register.php"

    EMAIL_INPUT = by_css("register_email_input", "input[name='email']")
    PASSWORD_INPUT = by_css("register_password_input", "input[name='password']")
    CONFIRM_PASSWORD_INPUT = by_css("register_confirm_password_input", "input[name='confirmPassword']")
    SUBMIT_BUTTON = by_css("register_button", "input[name='submit'], button[type='submit']")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open registration page")
    def open(self) -> "RegisterPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        logger.info("Opened registration page")
        return self

    @allure.step("Register user (email={email})")
    def register(self, email: str, password: str) -> None:
        self.actions.type_text(self.EMAIL_INPUT, email)
        self.actions.type_text(self.PASSWORD_INPUT, password)
        self.actions.type_text(self.CONFIRM_PASSWORD_INPUT, password)
        self.actions.click_robust(self.SUBMIT_BUTTON).raise_for_failure()
        self.navigation.wait_document_ready()
        logger.info(f"Submitted registration for: {email}")
