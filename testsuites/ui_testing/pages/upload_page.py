"""
================================================================================
File Upload Page Object
================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.element_actions import ElementActions, NavigationActions
from testsuites.ui_testing.framework.locators import by_css, by_id
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.framework.wait_engine import text_contains


SUCCESS_MARKER = "successfully uploaded"


class FileUploadPage:
    """File upload page object."""

    URL_PATH = "/test/upload/"

    FILE_INPUT = by_id("upload_file_input", "uploadfile_0")
    TERMS_CHECKBOX = by_id("accept_terms_checkbox", "terms")
    SUBMIT_BUTTON = by_id("upload_submit_button", "submitbutton")
    RESULT_MESSAGE = by_css("upload_result", "#res")

    def __init__(self, actions: ElementActions, navigation: NavigationActions, config: SuiteConfig):
        self.actions = actions
        self.navigation = navigation
        self.config = config

    @allure.step("Open upload page")
    def open(self) -> "FileUploadPage":
        self.navigation.navigate(self.config.url(self.URL_PATH))
        return self

    @allure.step("Upload file: {file_path}")
    def upload_file(self, file_path: str) -> None:
        self.actions.upload_file(self.FILE_INPUT, file_path)
        self.actions.set_checked(self.TERMS_CHECKBOX, True)
        self.actions.click(self.SUBMIT_BUTTON)
        logger.info(f"Submitted upload: {file_path}")

    def is_upload_successful(self) -> bool:
        return self.actions.check(text_contains(self.RESULT_MESSAGE, SUCCESS_MARKER), timeout=self.config.timeout)

    def result_message(self) -> str:
        return self.actions.read_text(self.RESULT_MESSAGE)
