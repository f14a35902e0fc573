import pytest

from testsuites.ui_testing.framework.errors import ElementNotFoundError, WaitTimeoutError
from testsuites.ui_testing.framework.locators import by_css, by_id
from testsuites.ui_testing.framework.wait_engine import (
    WaitCondition,
    WaitEngine,
    attribute_contains,
    document_ready,
    element_clickable,
    title_contains_any,
    url_contains,
)
from testsuites.unit.fakes import FakeElement, FakePage, FlickeringPage, playwright_error


def after(clock, seconds, value=True):
    return WaitCondition(f"ready after {seconds}s", lambda page: value if clock.now >= seconds else None)


def test_returns_on_first_satisfied_evaluation(engine, clock):
    outcome = engine.await_condition(after(clock, 1.0), timeout=5.0, poll_interval=0.25)

    assert outcome.satisfied
    assert outcome.elapsed == pytest.approx(1.0)
    assert outcome.attempts == 5


def test_satisfied_immediately_does_not_sleep(engine, clock):
    outcome = engine.await_condition(after(clock, 0.0, value="handle"))

    assert outcome.value == "handle"
    assert outcome.elapsed == 0.0
    assert clock.sleeps == []


def test_timeout_elapses_at_timeout(engine, clock):
    never = WaitCondition("never", lambda page: False)

    outcome = engine.await_condition(never, timeout=1.0, poll_interval=0.3)

    assert not outcome.satisfied
    assert outcome.elapsed == pytest.approx(1.0)
    # final sleep is clipped to the remaining time
    assert clock.sleeps[-1] == pytest.approx(0.1)


def test_transient_errors_keep_polling(engine, clock):
    calls = {"n": 0}

    def flaky(page):
        calls["n"] += 1
        if calls["n"] < 3:
            raise playwright_error("Element is detached from DOM")
        return "ok"

    assert engine.until(WaitCondition("flaky", flaky), timeout=5.0) == "ok"
    assert calls["n"] == 3


def test_non_transient_error_propagates(engine):
    def broken(page):
        raise KeyError("bug")

    with pytest.raises(KeyError):
        engine.until(WaitCondition("broken", broken))


def test_until_raises_timeout_with_description(engine):
    with pytest.raises(WaitTimeoutError) as exc_info:
        engine.until(WaitCondition("dropdown open", lambda page: False), timeout=1.0)

    assert "dropdown open" in str(exc_info.value)
    assert exc_info.value.kind == "Timeout"
    assert exc_info.value.elapsed == pytest.approx(1.0)


def test_missing_element_raises_not_found(engine):
    with pytest.raises(ElementNotFoundError, match="missing_button"):
        engine.until(element_clickable(by_id("missing_button", "nope")), timeout=0.5)


def test_present_but_disabled_raises_timeout(page, engine):
    page.elements["id=submit"] = FakeElement(enabled=False)

    with pytest.raises(WaitTimeoutError):
        engine.until(element_clickable(by_id("submit", "submit")), timeout=0.5)


def test_attribute_contains_tracks_class_changes(page, engine, clock):
    item = FakeElement(attributes={"class": "dropdown"})
    page.elements["css=li.menu"] = item
    condition = attribute_contains(by_css("menu", "li.menu"), "class", "open")

    assert not engine.await_condition(condition, timeout=0.5).satisfied

    item.attributes["class"] = "dropdown open"
    assert engine.await_condition(condition, timeout=0.5).satisfied


def test_document_url_and_title_conditions():
    page = FakePage(title="Guru99 Bank Demo")
    page.goto("https://demo.example.test/test/radio.html")
    engine = WaitEngine(page, timeout=0.0)

    assert engine.until(document_ready())
    assert engine.until(url_contains("/radio.html")).endswith("/radio.html")
    assert engine.until(title_contains_any(["DatePicker", "Demo"])) == "Guru99 Bank Demo"
    assert not engine.await_condition(title_contains_any(["Drag"])).satisfied


def test_late_element_that_never_enables_raises_timeout(clock):
    # missing for the first second, then present but disabled
    page = FlickeringPage(
        lambda lookup: clock.now < 1.0,
        {"id=submit": FakeElement(enabled=False)},
    )
    engine = WaitEngine(page, timeout=3.0, poll_interval=0.25)

    with pytest.raises(WaitTimeoutError) as exc_info:
        engine.until(element_clickable(by_id("submit", "submit")))

    assert exc_info.value.kind == "Timeout"
    assert "submit clickable" in str(exc_info.value)


def test_outcome_drops_error_once_element_resolves(clock):
    page = FlickeringPage(lambda lookup: lookup == 1, {"id=submit": FakeElement(visible=False)})
    engine = WaitEngine(page, timeout=1.0, poll_interval=0.25)

    outcome = engine.await_condition(element_clickable(by_id("submit", "submit")))

    assert not outcome.satisfied
    assert outcome.last_error is None
