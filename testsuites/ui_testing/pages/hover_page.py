"""
================================================================================
Hover Page Object
================================================================================

Tooltip demo. The tooltip is an optional affordance that does not always
render; cases using this page treat it as best-effort.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css, by_id
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class HoverPage:
    """Tooltip hover page object."""

    URL_PATH = "/test/tooltip.html"

    DOWNLOAD_BUTTON = by_id("download_button", "download_now")
    TOOLTIP = by_css("tooltip", ".tooltip")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open tooltip page")
    def open(self) -> "HoverPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    def has_download_button(self) -> bool:
        return self.actions.is_present(self.DOWNLOAD_BUTTON)

    def hover_download_button(self) -> None:
        self.actions.hover(self.DOWNLOAD_BUTTON)

    def is_tooltip_visible(self) -> bool:
        return self.actions.is_visible(self.TOOLTIP)

    def tooltip_text(self) -> str:
        return self.actions.read_text(self.TOOLTIP)
