"""
================================================================================
Guru99 Demo Suite
================================================================================

Test cases against the Guru99 demo site, registered on a TestOrchestrator.

Dependency chain:
    test_a1_user_registration
      -> test_c_valid_login        (uses the account created by a1)
        -> test_d_user_logout      (requires a1 and c)

Every other case is independent and starts from a fresh session.
test_k_hover_tooltip is the only best-effort case: the tooltip is an optional
affordance of the demo page.

Usage:
    with BrowserManager.from_config(config) as manager:
        report = build_suite(manager, config).run_suite()

Author: Automation Team
License: MIT
================================================================================
"""

import os
import tempfile
import time
from typing import Any, Optional

from loguru import logger

from testsuites.ui_testing.framework.orchestrator import CaseContext, TestOrchestrator
from testsuites.ui_testing.framework.suite_config import SuiteConfig
from testsuites.ui_testing.pages import Pages


REGISTRATION_PASSWORD = "Password123"

TEXTAREA_SAMPLE = (
    "This is a test text for testing the textarea functionality on the Guru99 website. "
    "We are verifying text input, character display, and form interaction features."
)

# (path, keywords); a title must contain at least one keyword
STATIC_PAGES = [
    ("/test/", ("DatePicker", "Demo", "Date")),
    ("/test/drag_drop.html", ("Drag", "Drop")),
    ("/test/newtours/register.php", ("Register", "Mercury", "Tours")),
]

DROPDOWN_MENU = "Selenium"


def unique_email() -> str:
    return f"test{int(time.time() * 1000)}@example.com"


# ================================================================================
# Dependency Chain
# ================================================================================

def user_registration(ctx: CaseContext) -> None:
    """Register a new account; later cases log in with it."""
    email = unique_email()
    ctx.pages.register.open().register(email, REGISTRATION_PASSWORD)

    assert ctx.pages.login.is_on_login_page(), "After registration should redirect to login page"

    ctx.state.record_registration(email, REGISTRATION_PASSWORD)


def invalid_login_attempt(ctx: CaseContext) -> None:
    """Invalid credentials are rejected."""
    login = ctx.pages.login.open()
    login.log_in(ctx.config.invalid_email, ctx.config.invalid_password)

    assert login.is_on_login_page(), "Should remain on login page after invalid login"
    assert not ctx.pages.home.is_logged_in(), "Should not be logged in with invalid credentials"


def valid_login(ctx: CaseContext) -> None:
    """Log in with the account created by the registration case."""
    email, password = ctx.state.credentials()
    logger.info(f"Using registered email: {email}")

    ctx.pages.login.open().log_in(email, password)

    assert ctx.pages.home.is_logged_in(), "Should be successfully logged in"
    identity = ctx.pages.home.logged_in_identity()
    assert identity == email, f"Logged in user email should match: expected {email}, got {identity}"

    ctx.state.record_login()


def user_logout(ctx: CaseContext) -> None:
    """Log out of the registered account."""
    home = ctx.pages.home
    login = ctx.pages.login

    # Sessions are never shared, so sign in again before logging out.
    if not home.is_logged_in():
        email, password = ctx.state.credentials()
        login.open().log_in(email, password)
        assert home.is_logged_in(), "Must be logged in before testing logout"

    home.log_out()

    assert login.is_on_login_page(), "After logout should return to login page"
    assert not home.is_logged_in(), "Should not be logged in after logout"


# ================================================================================
# Independent Cases
# ================================================================================

def form_interactions(ctx: CaseContext) -> None:
    """Radio group and checkbox state changes."""
    form = ctx.pages.form.open()

    form.select_single_choice(2)
    form.set_multi_choice(1, True)
    form.set_multi_choice(3, True)

    assert form.is_single_choice_selected(2), "Radio button 2 should be selected"
    assert not form.is_single_choice_selected(1), "Radio button 1 should not be selected"
    assert not form.is_single_choice_selected(3), "Radio button 3 should not be selected"

    assert form.is_multi_choice_selected(1), "Checkbox 1 should be selected"
    assert not form.is_multi_choice_selected(2), "Checkbox 2 should not be selected"
    assert form.is_multi_choice_selected(3), "Checkbox 3 should be selected"

    form.set_multi_choice(3, False)
    assert not form.is_multi_choice_selected(3), "Checkbox 3 should be unchecked"


def file_upload(ctx: CaseContext) -> None:
    """Upload a temporary text file."""
    handle, path = tempfile.mkstemp(prefix="upload-test-", suffix=".txt")
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            f.write("upload test content\n")
        logger.info(f"Created temporary file: {path}")

        upload = ctx.pages.upload.open()
        upload.upload_file(path)

        assert upload.is_upload_successful(), "File should be uploaded successfully"
        logger.info(f"Upload result: {upload.result_message()}")
    finally:
        os.remove(path)


def multiple_static_pages(ctx: CaseContext) -> None:
    """Static page titles contain an expected keyword."""
    static = ctx.pages.static
    for path, keywords in STATIC_PAGES:
        static.open_and_read_title(path)
        assert static.title_matches(keywords), (
            f"Page title '{static.current_title()}' of {path} should contain one of {list(keywords)}"
        )


def complex_xpath(ctx: CaseContext) -> None:
    """Submit button label found through a nested XPath."""
    login = ctx.pages.login.open()
    label = login.submit_button_text()
    assert label == "Sign in", f"Button text should be 'Sign in', got '{label}'"


def cookie_manipulation(ctx: CaseContext) -> None:
    """Write, read and delete cookies within the case's own session."""
    cookies = ctx.pages.cookies.open()
    cookies.all_cookies()

    cookies.add_cookie("testCookie", "testValue")
    assert cookies.get_cookie_value("testCookie") == "testValue", "Cookie value should match"

    cookies.add_consent_cookie()
    cookies.refresh()
    assert cookies.get_cookie_value("cookie_consent") == "accepted", "Consent cookie should survive refresh"

    cookies.delete_all_cookies()
    assert cookies.all_cookies() == [], "All cookies should be deleted"


def drag_and_drop(ctx: CaseContext) -> None:
    """All four blocks dropped shows the confirmation."""
    page = ctx.pages.drag_and_drop.open()
    page.complete_all()
    assert page.is_perfect_displayed(), "Perfect button should be displayed after drag and drop operations"


def hover_tooltip(ctx: CaseContext) -> None:
    """Tooltip shown on hover (best-effort)."""
    hover = ctx.pages.hover.open()
    if not hover.has_download_button():
        logger.warning("Download button not found on page")

    with ctx.best_effort("Tooltip hover unavailable"):
        hover.hover_download_button()
        if not hover.is_tooltip_visible():
            ctx.skip("Tooltip not visible, page structure may have changed")
        text = hover.tooltip_text()

    assert text, "Tooltip text should not be empty"
    logger.info(f"Tooltip displays correctly, text: {text}")


def browser_history(ctx: CaseContext) -> None:
    """Back, forward and refresh against a two-page history."""
    history = ctx.pages.history

    history.visit_first()
    assert history.is_on_first(), "Should be on first page"

    history.visit_second()
    assert history.is_on_second(), "Should be on second page"

    history.go_back()
    assert history.is_on_first(), "After going back should be on first page"

    history.go_forward()
    assert history.is_on_second(), "After going forward should be on second page"

    history.refresh()
    assert history.is_on_second(), "After refresh should still be on second page"


def textarea_functionality(ctx: CaseContext) -> None:
    textarea = ctx.pages.textarea.open()
    textarea.enter_text(TEXTAREA_SAMPLE)
    assert textarea.text_content() == TEXTAREA_SAMPLE, "Textarea should contain the input text"


def dropdown_menu(ctx: CaseContext) -> None:
    """Navbar dropdown opens on click."""
    menu = ctx.pages.menu.open()
    menu.expand(DROPDOWN_MENU)
    assert menu.is_expanded(DROPDOWN_MENU), f"Dropdown menu {DROPDOWN_MENU} should be expanded"


# ================================================================================
# Suite Builder
# ================================================================================

def build_suite(session_manager: Any, config: Optional[SuiteConfig] = None) -> TestOrchestrator:
    """
    Register every Guru99 case on a new orchestrator.

    Args:
        session_manager: BrowserManager (or any object with a session() context manager)
        config: Suite configuration; read from the global config when omitted

    Returns:
        Orchestrator ready for run_suite()
    """
    config = config or SuiteConfig.from_global_config()
    orchestrator = TestOrchestrator(session_manager, config, pages_factory=Pages)

    orchestrator.case("test_a1_user_registration", completion_flag="registration_completed")(user_registration)
    orchestrator.case("test_a2_invalid_login_attempt")(invalid_login_attempt)
    orchestrator.case(
        "test_c_valid_login",
        depends_on=("test_a1_user_registration",),
        completion_flag="login_completed",
    )(valid_login)
    orchestrator.case(
        "test_d_user_logout",
        depends_on=("test_a1_user_registration", "test_c_valid_login"),
    )(user_logout)
    orchestrator.case("test_e_form_interactions")(form_interactions)
    orchestrator.case("test_f_file_upload")(file_upload)
    orchestrator.case("test_g_multiple_static_pages")(multiple_static_pages)
    orchestrator.case("test_h_complex_xpath")(complex_xpath)
    orchestrator.case("test_i_cookie_manipulation")(cookie_manipulation)
    orchestrator.case("test_j_drag_and_drop")(drag_and_drop)
    orchestrator.case("test_k_hover_tooltip", best_effort=True)(hover_tooltip)
    orchestrator.case("test_l_browser_history")(browser_history)
    orchestrator.case("test_m_textarea_functionality", description="Textarea input is echoed back")(
        textarea_functionality
    )
    orchestrator.case("test_n_dropdown_menu")(dropdown_menu)

    orchestrator.validate()
    return orchestrator


__all__ = ["build_suite"]
