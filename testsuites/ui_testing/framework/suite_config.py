"""
Typed view of the configuration values the UI suite consumes.

Values come from ``autotest_tools.common.get_config``; this module only reads
them and normalizes types (environment overrides always arrive as strings).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from autotest_tools.common import get_config


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class SuiteConfig:
    """
    Attributes:
        base_url: Target application base URL
        invalid_email: Credential deliberately used for negative login tests
        invalid_password: Password paired with invalid_email
        browser: 'chromium', 'firefox' or 'webkit'
        headless: Run browser headless
        timeout: Default wait timeout (seconds)
        poll_interval: Wait polling interval (seconds)
        native_click_timeout: Seconds before a native click counts as blocked
    """
    base_url: str = "https://demo.guru99.com"
    invalid_email: str = "invalid_user@example.com"
    invalid_password: str = "wrong_password"
    browser: str = "chromium"
    headless: bool = True
    timeout: float = 10.0
    poll_interval: float = 0.25
    native_click_timeout: float = 2.0

    @classmethod
    def from_global_config(cls) -> "SuiteConfig":
        defaults = cls()
        return cls(
            base_url=str(get_config("ui.base_url", defaults.base_url)).rstrip("/"),
            invalid_email=str(get_config("ui.invalid_email", defaults.invalid_email)),
            invalid_password=str(get_config("ui.invalid_password", defaults.invalid_password)),
            browser=str(get_config("ui.browser", defaults.browser)),
            headless=_as_bool(get_config("ui.headless", defaults.headless)),
            timeout=float(get_config("ui.timeout", defaults.timeout)),
            poll_interval=float(get_config("ui.poll_interval", defaults.poll_interval)),
            native_click_timeout=float(get_config("ui.native_click_timeout", defaults.native_click_timeout)),
        )

    def url(self, path: str) -> str:
        """Absolute URL for a path under base_url."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"


__all__ = ["SuiteConfig"]
