"""
================================================================================
Navigation Menu Page Object
================================================================================

Navbar dropdown menus. Dropdowns open asynchronously and their overlays often
intercept native clicks, so menu clicks go through `click_robust`.

Expansion state is read from the `open` marker in the class list of the
toggle's parent `<li>`, not from rendering.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import Locator, by_css, by_xpath, xpath_literal
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.framework.wait_engine import class_token_present, element_visible


OPEN_MARKER = "open"


class MenuPage:
    """Navbar dropdown page object."""

    URL_PATH = "/test/radio.html"

    NAVBAR = by_css("navbar", ".navbar-nav")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open page with navigation menu")
    def open(self) -> "MenuPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    @allure.step("Expand menu: {menu_name}")
    def expand(self, menu_name: str) -> None:
        """Click the dropdown toggle and wait for the open marker."""
        self.actions.wait_for(element_visible(self.NAVBAR))
        outcome = self.actions.click_robust(self._toggle(menu_name)).raise_for_failure()
        logger.info(f"Clicked dropdown menu: {menu_name} (via {outcome.via})")
        self.actions.wait_for(class_token_present(self._menu_item(menu_name), OPEN_MARKER))

    def is_expanded(self, menu_name: str) -> bool:
        classes = self.actions.get_attribute(self._menu_item(menu_name), "class") or ""
        expanded = OPEN_MARKER in classes.split()
        logger.debug(f"Dropdown menu {menu_name} expanded: {expanded}")
        return expanded

    @allure.step("Choose '{option_text}' from menu {menu_name}")
    def choose(self, menu_name: str, option_text: str) -> None:
        if not self.is_expanded(menu_name):
            self.expand(menu_name)
        outcome = self.actions.click_robust(self._option(option_text)).raise_for_failure()
        logger.info(f"Selected dropdown option: {option_text} (via {outcome.via})")
        self.navigation.wait_document_ready()

    @staticmethod
    def _toggle(menu_name: str) -> Locator:
        return by_xpath(
            f"menu_toggle[{menu_name}]",
            f"//a[contains(text(),{xpath_literal(menu_name)}) and contains(@class,'dropdown-toggle')]",
        )

    @staticmethod
    def _menu_item(menu_name: str) -> Locator:
        return by_xpath(
            f"menu_item[{menu_name}]",
            f"//a[contains(text(),{xpath_literal(menu_name)}) and contains(@class,'dropdown-toggle')]/parent::li",
        )

    @staticmethod
    def _option(option_text: str) -> Locator:
        return by_xpath(
            f"menu_option[{option_text}]",
            f"//ul[contains(@class,'dropdown-menu')]//a[contains(text(),{xpath_literal(option_text)})]",
        )
