"""
Lazy page-object factory bound to one session.

Page objects are created on first access and live as long as the session.
"""

from __future__ import annotations

from functools import cached_property

from testsuites.ui_testing.framework.browser_manager import Session
from testsuites.ui_testing.framework.suite_config import SuiteConfig

from .cookie_manager import CookieManager
from .drag_drop_page import DragAndDropPage
from .form_page import FormPage
from .history_page import HistoryPage
from .home_page import HomePage
from .hover_page import HoverPage
from .login_page import LoginPage
from .menu_page import MenuPage
from .register_page import RegisterPage
from .static_pages import StaticPages
from .textarea_page import TextareaPage
from .upload_page import FileUploadPage


class Pages:
    """Page objects for a session."""

    def __init__(self, session: Session, config: SuiteConfig):
        self.session = session
        self.config = config

    def _build(self, page_cls):
        return page_cls(self.session.actions, self.session.navigation, self.config)

    @cached_property
    def login(self) -> LoginPage:
        return self._build(LoginPage)

    @cached_property
    def register(self) -> RegisterPage:
        return self._build(RegisterPage)

    @cached_property
    def home(self) -> HomePage:
        return self._build(HomePage)

    @cached_property
    def form(self) -> FormPage:
        return self._build(FormPage)

    @cached_property
    def menu(self) -> MenuPage:
        return self._build(MenuPage)

    @cached_property
    def history(self) -> HistoryPage:
        return self._build(HistoryPage)

    @cached_property
    def upload(self) -> FileUploadPage:
        return self._build(FileUploadPage)

    @cached_property
    def drag_and_drop(self) -> DragAndDropPage:
        return self._build(DragAndDropPage)

    @cached_property
    def hover(self) -> HoverPage:
        return self._build(HoverPage)

    @cached_property
    def textarea(self) -> TextareaPage:
        return self._build(TextareaPage)

    @cached_property
    def static(self) -> StaticPages:
        return self._build(StaticPages)

    @cached_property
    def cookies(self) -> CookieManager:
        return CookieManager(self.session.cookies, self.session.navigation, self.config)
