"""
================================================================================
Locators
================================================================================

Immutable element descriptors declared by page objects.

A Locator only knows *how* to find an element (strategy + value). Resolving
it against a live page is the job of ElementActions.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass


# Playwright selector engine prefix per strategy
_ENGINES = {
    "css": "css",
    "xpath": "xpath",
    "id": "id",
    "text": "text",
}


@dataclass(frozen=True, repr=False)
class Locator:
    """
    Page-defined descriptor of one or more elements.

    Attributes:
        name: Human-readable element name for logging/Allure
        strategy: One of 'css', 'xpath', 'id', 'text'
        value: Selector value for the strategy
    """
    name: str
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in _ENGINES:
            raise ValueError(
                f"Unknown locator strategy '{self.strategy}' for {self.name}. "
                f"Expected one of: {sorted(_ENGINES)}"
            )

    @property
    def selector(self) -> str:
        """Playwright selector string."""
        return f"{_ENGINES[self.strategy]}={self.value}"

    def __repr__(self) -> str:
        return f"{self.name} <{self.strategy}: {self.value}>"


def by_css(name: str, value: str) -> Locator:
    return Locator(name, "css", value)


def by_xpath(name: str, value: str) -> Locator:
    return Locator(name, "xpath", value)


def by_id(name: str, value: str) -> Locator:
    return Locator(name, "id", value)


def by_text(name: str, value: str) -> Locator:
    return Locator(name, "text", value)


def xpath_literal(text: str) -> str:
    """Quote text for safe embedding in an XPath expression."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


__all__ = [
    "Locator",
    "by_css",
    "by_xpath",
    "by_id",
    "by_text",
    "xpath_literal",
]
