"""
================================================================================
Cookie Manager
================================================================================

Cookie operations for the cookie demo page. Cookies written here live only in
the current session's browser context.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import CookieActions, NavigationActions
from testsuites.ui_testing.framework.suite_config import SuiteConfig


CONSENT_COOKIE = ("cookie_consent", "accepted")


class CookieManager:
    """Cookie demo page object."""

    URL_PATH = "/test/cookie/selenium_aut.php"

    def __init__(self, cookies: CookieActions, navigation: NavigationActions, config: SuiteConfig):
        self.cookies = cookies
        self.navigation = navigation
        self.config = config

    @allure.step("Open cookie test page")
    def open(self) -> "CookieManager":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    def all_cookies(self) -> List[Dict[str, Any]]:
        cookies = self.cookies.all()
        for cookie in cookies:
            logger.info(f"Cookie: {cookie['name']}={cookie['value']}")
        return cookies

    @allure.step("Add cookie {name}")
    def add_cookie(self, name: str, value: str) -> None:
        self.cookies.add(name, value)

    def get_cookie_value(self, name: str) -> Optional[str]:
        return self.cookies.get(name)

    def add_consent_cookie(self) -> None:
        """Pre-accept the consent popup."""
        self.cookies.add(*CONSENT_COOKIE)

    @allure.step("Delete all cookies")
    def delete_all_cookies(self) -> None:
        self.cookies.clear()

    def refresh(self) -> None:
        self.navigation.refresh()
