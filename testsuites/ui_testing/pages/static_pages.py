"""
Read-only static pages checked by title.
"""

from __future__ import annotations

from typing import Sequence

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.framework.wait_engine import title_contains_any


class StaticPages:
    """Static page visits."""

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open {path}")
    def open_and_read_title(self, path: str) -> str:
        self.navigation.navigate(self.config.url(path))
        title = self.navigation.title()
        logger.info(f"Testing page: {path}, title: {title}")
        return title

    def title_matches(self, keywords: Sequence[str]) -> bool:
        """Title contains at least one keyword (titles can render late)."""
        return self.actions.check(title_contains_any(keywords))

    def current_title(self) -> str:
        return self.navigation.title()
