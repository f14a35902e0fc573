"""
================================================================================
Form Page Object
================================================================================

Radio button & checkbox demo page.

Radio options 1..3 form one control group, so selecting an option clears its
siblings without any help from this page object.

================================================================================
"""

from __future__ import annotations

from typing import Dict

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import Locator, by_id
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class FormPage:
    """Radio button & checkbox page object."""

    URL_PATH = "/test/radio.html"

    RADIO_OPTIONS: Dict[int, Locator] = {
        1: by_id("radio_option_1", "vfb-7-1"),
        2: by_id("radio_option_2", "vfb-7-2"),
        3: by_id("radio_option_3", "vfb-7-3"),
    }

    CHECKBOXES: Dict[int, Locator] = {
        1: by_id("checkbox_1", "vfb-6-0"),
        2: by_id("checkbox_2", "vfb-6-1"),
        3: by_id("checkbox_3", "vfb-6-2"),
    }

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open radio & checkbox page")
    def open(self) -> "FormPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        logger.info("Opened radio button and checkbox test page")
        return self

    @allure.step("Select radio option {option_index}")
    def select_single_choice(self, option_index: int) -> None:
        self.actions.select_if_unselected(self._radio(option_index))
        logger.info(f"Selected option {option_index}")

    @allure.step("Set checkbox {index} checked={desired}")
    def set_multi_choice(self, index: int, desired: bool) -> None:
        self.actions.set_checked(self._checkbox(index), desired)

    def is_single_choice_selected(self, option_index: int) -> bool:
        return self.actions.is_selected(self._radio(option_index))

    def is_multi_choice_selected(self, index: int) -> bool:
        return self.actions.is_selected(self._checkbox(index))

    def title(self) -> str:
        return self.navigation.title()

    def _radio(self, option_index: int) -> Locator:
        try:
            return self.RADIO_OPTIONS[option_index]
        except KeyError:
            raise ValueError(f"Invalid option number: {option_index}") from None

    def _checkbox(self, index: int) -> Locator:
        try:
            return self.CHECKBOXES[index]
        except KeyError:
            raise ValueError(f"Invalid checkbox number: {index}") from None
