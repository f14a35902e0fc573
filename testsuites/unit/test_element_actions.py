import pytest

from testsuites.ui_testing.framework.element_actions import ClickOutcome, ElementActions
from testsuites.ui_testing.framework.errors import (
    ElementNotFoundError,
    InteractableError,
    WaitTimeoutError,
)
from testsuites.ui_testing.framework.locators import by_css, by_id
from testsuites.ui_testing.framework.wait_engine import WaitEngine
from testsuites.unit.fakes import FakeElement, FlickeringPage, playwright_error


BUTTON = by_id("menu_button", "menu")
CHECKBOX = by_id("newsletter_checkbox", "newsletter")
PASSWORD = by_id("password_input", "passwd")


class TestClick:

    def test_click_delivers_native_click(self, page, actions):
        button = page.elements[BUTTON.selector] = FakeElement()

        actions.click(BUTTON)

        assert button.native_clicks == 1

    def test_click_converts_driver_error(self, page, actions):
        page.elements[BUTTON.selector] = FakeElement(click_error=playwright_error("intercepted"))

        with pytest.raises(InteractableError, match="intercepted"):
            actions.click(BUTTON)

    def test_click_missing_element(self, actions):
        with pytest.raises(ElementNotFoundError):
            actions.click(BUTTON, timeout=1.0)


class TestClickRobust:

    def test_native_path_first(self, page, actions):
        button = page.elements[BUTTON.selector] = FakeElement()

        outcome = actions.click_robust(BUTTON)

        assert outcome == ClickOutcome(True, "native", None)
        assert button.native_clicks == 1
        assert button.injected_clicks == 0

    def test_injected_fallback_after_intercepted_native_click(self, page, actions):
        button = page.elements[BUTTON.selector] = FakeElement(click_error=playwright_error("intercepted"))

        outcome = actions.click_robust(BUTTON)

        assert outcome.succeeded
        assert outcome.via == "injected"
        assert isinstance(outcome.last_error, InteractableError)
        assert button.native_attempts == 1
        assert button.injected_clicks == 1

    def test_injected_fallback_when_never_clickable(self, page, actions):
        button = page.elements[BUTTON.selector] = FakeElement(enabled=False)

        outcome = actions.click_robust(BUTTON)

        assert outcome.via == "injected"
        assert isinstance(outcome.last_error, WaitTimeoutError)
        assert button.native_attempts == 0
        assert button.clicks == 1

    def test_both_strategies_fail(self, page, actions):
        page.elements[BUTTON.selector] = FakeElement(
            click_error=playwright_error("intercepted"),
            script_error=playwright_error("detached"),
        )

        outcome = actions.click_robust(BUTTON)

        assert not outcome.succeeded
        with pytest.raises(InteractableError, match="detached"):
            outcome.raise_for_failure()

    def test_missing_element_has_no_fallback(self, actions):
        with pytest.raises(ElementNotFoundError):
            actions.click_robust(BUTTON, timeout=1.0)

    @staticmethod
    def _flickering_actions(detached, element):
        page = FlickeringPage(detached, {BUTTON.selector: element})
        engine = WaitEngine(page, timeout=5.0, poll_interval=0.25)
        return ElementActions(page, engine, native_click_timeout=1.0)

    def test_fallback_when_element_rerenders_hidden(self, clock):
        button = FakeElement(visible=False)
        # resolved, detached on the first native probe, then back but hidden
        actions = self._flickering_actions(lambda lookup: lookup == 2, button)

        outcome = actions.click_robust(BUTTON)

        assert outcome.via == "injected"
        assert isinstance(outcome.last_error, WaitTimeoutError)
        assert button.injected_clicks == 1

    def test_fallback_when_detached_for_whole_native_window(self, clock):
        button = FakeElement()
        actions = self._flickering_actions(lambda lookup: lookup > 1 and clock.now <= 1.0, button)

        outcome = actions.click_robust(BUTTON)

        assert outcome.via == "injected"
        assert isinstance(outcome.last_error, ElementNotFoundError)
        assert button.native_attempts == 0
        assert button.injected_clicks == 1


class TestToggles:

    def test_set_checked_is_idempotent(self, page, actions):
        box = page.elements[CHECKBOX.selector] = FakeElement(kind="checkbox")

        actions.set_checked(CHECKBOX, True)
        actions.set_checked(CHECKBOX, True)

        assert box.checked
        assert box.clicks == 1

    def test_set_checked_unchecks(self, page, actions):
        box = page.elements[CHECKBOX.selector] = FakeElement(kind="checkbox", checked=True)

        actions.set_checked(CHECKBOX, False)
        actions.set_checked(CHECKBOX, False)

        assert not box.checked
        assert box.clicks == 1

    def test_select_if_unselected_leaves_selected_radio_alone(self, page, actions):
        radio = page.elements[CHECKBOX.selector] = FakeElement(kind="radio", checked=True)

        actions.select_if_unselected(CHECKBOX)

        assert radio.clicks == 0
        assert actions.is_selected(CHECKBOX)


class TestReadsAndInput:

    def test_read_text_strips(self, page, actions):
        page.elements["css=.msg"] = FakeElement(text="  Sign in \n")

        assert actions.read_text(by_css("msg", ".msg")) == "Sign in"

    def test_type_text_fills_value(self, page, actions):
        field = page.elements[PASSWORD.selector] = FakeElement()

        actions.type_text(PASSWORD, "Password123")

        assert field.value == "Password123"
        assert actions.read_value(PASSWORD) == "Password123"

    def test_get_attribute(self, page, actions):
        page.elements[BUTTON.selector] = FakeElement(attributes={"class": "dropdown open"})

        assert actions.get_attribute(BUTTON, "class") == "dropdown open"
        assert actions.get_attribute(BUTTON, "title") is None

    def test_presence_checks_do_not_raise(self, page, actions):
        page.elements[BUTTON.selector] = FakeElement(visible=False)

        assert actions.is_present(BUTTON)
        assert not actions.is_visible(BUTTON)
        assert not actions.is_present(CHECKBOX)

    def test_drag_and_upload(self, page, actions):
        source = page.elements["css=#a"] = FakeElement()
        target = page.elements["css=#b"] = FakeElement()
        upload = page.elements["css=#file"] = FakeElement()

        actions.drag_to(by_css("a", "#a"), by_css("b", "#b"))
        actions.upload_file(by_css("file", "#file"), "/tmp/upload.txt")

        assert source.dropped_on == [target]
        assert upload.uploaded == "/tmp/upload.txt"


class TestNavigation:

    def test_back_forward_refresh(self, page, navigation):
        navigation.navigate("https://demo.example.test/first")
        navigation.navigate("https://demo.example.test/second")

        navigation.back()
        assert navigation.current_url.endswith("/first")

        navigation.forward()
        navigation.refresh()
        assert navigation.current_url.endswith("/second")
        assert page.reloads == 1
