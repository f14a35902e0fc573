"""
================================================================================
Page Capabilities
================================================================================

Capability interfaces implemented by the page objects. Test case bodies
depend on these protocols, never on a shared page base class.

================================================================================
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RegistrationCapability(Protocol):
    def open(self) -> "RegistrationCapability": ...

    def register(self, email: str, password: str) -> None: ...


@runtime_checkable
class LoginCapability(Protocol):
    def open(self) -> "LoginCapability": ...

    def log_in(self, email: str, password: str) -> None: ...

    def is_on_login_page(self) -> bool: ...


@runtime_checkable
class AccountCapability(Protocol):
    def is_logged_in(self) -> bool: ...

    def logged_in_identity(self) -> str: ...

    def log_out(self) -> None: ...


@runtime_checkable
class ChoiceFormCapability(Protocol):
    def select_single_choice(self, option_index: int) -> None: ...

    def set_multi_choice(self, index: int, desired: bool) -> None: ...

    def is_single_choice_selected(self, option_index: int) -> bool: ...

    def is_multi_choice_selected(self, index: int) -> bool: ...


@runtime_checkable
class MenuCapability(Protocol):
    def expand(self, menu_name: str) -> None: ...

    def is_expanded(self, menu_name: str) -> bool: ...

    def choose(self, menu_name: str, option_text: str) -> None: ...


@runtime_checkable
class HistoryCapability(Protocol):
    def visit_first(self) -> None: ...

    def visit_second(self) -> None: ...

    def go_back(self) -> None: ...

    def go_forward(self) -> None: ...

    def refresh(self) -> None: ...

    def is_on_first(self) -> bool: ...

    def is_on_second(self) -> bool: ...


__all__ = [
    "RegistrationCapability",
    "LoginCapability",
    "AccountCapability",
    "ChoiceFormCapability",
    "MenuCapability",
    "HistoryCapability",
]
