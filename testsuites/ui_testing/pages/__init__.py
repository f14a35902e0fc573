"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the demo application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions built from ElementActions
    - Structural verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .cookie_manager import CookieManager
from .drag_drop_page import DragAndDropPage
from .factory import Pages
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

__all__ = [
    "Pages",
    "LoginPage",
    "RegisterPage",
    "HomePage",
    "FormPage",
    "MenuPage",
    "HistoryPage",
    "FileUploadPage",
    "DragAndDropPage",
    "HoverPage",
    "TextareaPage",
    "StaticPages",
    "CookieManager",
]
