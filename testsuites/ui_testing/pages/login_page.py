"""
================================================================================
Login Page Object
================================================================================

Login form of the demo application.

Design goals:
  - Built only from ElementActions / NavigationActions calls
  - Structural checks (`is_on_login_page`) have no side effects
  - Interaction failures propagate unchanged to the test case

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css, by_id, by_xpath
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class LoginPage:
    """Login page object."""

    URL_PATH = "/test/login.html"

    LOGIN_FORM = by_id("login_form", "login_form")
    EMAIL_INPUT = by_id("email_input", "email")
    PASSWORD_INPUT = by_id("password_input", "passwd")
    SUBMIT_BUTTON = by_id("login_button", "SubmitLogin")
    SUBMIT_BUTTON_LABEL = by_xpath(
        "login_button_label", "//form[@id='login_form']//button[@id='SubmitLogin']//span"
    )
    ERROR_MESSAGE = by_css("login_error", ".alert-danger, .error-message")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @property
    def url(self) -> str:
        return self.config.url(self.URL_PATH)

    @allure.step("Open login page")
    def open(self) -> "LoginPage":
        self.navigation.navigate(self.url)
        logger.info("Opened login page")
        return self

    @allure.step("Login (email={email})")
    def log_in(self, email: str, password: str) -> None:
        """Fill and submit the login form. Does not assert the outcome."""
        self.actions.type_text(self.EMAIL_INPUT, email)
        self.actions.type_text(self.PASSWORD_INPUT, password)
        self.actions.click(self.SUBMIT_BUTTON)
        self.navigation.wait_document_ready()

    def is_on_login_page(self) -> bool:
        """Login form and its submit button are present."""
        return self.actions.is_present(self.LOGIN_FORM) and self.actions.is_present(self.SUBMIT_BUTTON)

    def error_displayed(self) -> bool:
        return self.actions.is_visible(self.ERROR_MESSAGE, timeout=1.5)

    def submit_button_text(self) -> str:
        """Label of the submit button, located through a nested XPath."""
        return self.actions.read_text(self.SUBMIT_BUTTON_LABEL)
