"""
================================================================================
Drag and Drop Page Object
================================================================================

Accounting drag-and-drop demo: four blocks must be dropped onto the debit
and credit columns before the "Perfect!" confirmation shows.

================================================================================
"""

from __future__ import annotations

from typing import List, Tuple

import allure

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import Locator, by_css
from testsuites.ui_testing.framework.suite_config import SuiteConfig


class DragAndDropPage:
    """Drag and drop page object."""

    URL_PATH = "/test/drag_drop.html"

    BANK_BLOCK = by_css("bank_block", "#credit2 a")
    SALES_BLOCK = by_css("sales_block", "#credit1 a")
    AMOUNT_BLOCK = by_css("amount_5000_block", "#fourth a")

    DEBIT_ACCOUNT = by_css("debit_account_slot", "#bank li")
    DEBIT_AMOUNT = by_css("debit_amount_slot", "#amt7 li")
    CREDIT_ACCOUNT = by_css("credit_account_slot", "#loan li")
    CREDIT_AMOUNT = by_css("credit_amount_slot", "#amt8 li")

    PERFECT_BUTTON = by_css("perfect_button", "#equal a")

    # (source, target) pairs in drop order
    DROPS: List[Tuple[Locator, Locator]] = [
        (BANK_BLOCK, DEBIT_ACCOUNT),
        (AMOUNT_BLOCK, DEBIT_AMOUNT),
        (SALES_BLOCK, CREDIT_ACCOUNT),
        (AMOUNT_BLOCK, CREDIT_AMOUNT),
    ]

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open drag and drop page")
    def open(self) -> "DragAndDropPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    @allure.step("Complete all drag and drop operations")
    def complete_all(self) -> None:
        for source, target in self.DROPS:
            self.actions.drag_to(source, target)

    def is_perfect_displayed(self) -> bool:
        return self.actions.is_visible(self.PERFECT_BUTTON, timeout=self.config.timeout)
