"""
================================================================================
Textarea Page Object
================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class TextareaPage:
    """Textarea page object."""

    URL_PATH = "/test/guru99home/textarea.html"

    TEXTAREA = by_css("textarea", "textarea")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open textarea page")
    def open(self) -> "TextareaPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    def enter_text(self, text: str) -> None:
        self.actions.type_text(self.TEXTAREA, text)

    def text_content(self) -> str:
        return self.actions.read_value(self.TEXTAREA)
