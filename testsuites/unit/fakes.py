"""
In-memory stand-ins for the Playwright objects the framework talks to.

Only the calls the framework makes are implemented.
"""

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError


class FakeClock:
    """Replaces the time module inside wait_engine; sleeping advances the clock."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeElement:
    def __init__(
        self,
        kind: str = "button",
        checked: bool = False,
        visible: bool = True,
        enabled: bool = True,
        text: str = "",
        value: str = "",
        attributes: Optional[Dict[str, str]] = None,
        click_error: Optional[Exception] = None,
        script_error: Optional[Exception] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.kind = kind
        self.checked = checked
        self.visible = visible
        self.enabled = enabled
        self.text = text
        self.value = value
        self.attributes = dict(attributes or {})
        self.click_error = click_error
        self.script_error = script_error
        self.on_click = on_click
        self.group: Optional[List["FakeElement"]] = None

        self.native_attempts = 0
        self.native_clicks = 0
        self.injected_clicks = 0
        self.uploaded = None
        self.hovered = False
        self.dropped_on: List["FakeElement"] = []

    @property
    def clicks(self) -> int:
        return self.native_clicks + self.injected_clicks

    # Playwright Locator surface

    def is_visible(self) -> bool:
        return self.visible

    def is_enabled(self) -> bool:
        return self.enabled

    def is_checked(self) -> bool:
        return self.checked

    def click(self, timeout=None) -> None:
        self.native_attempts += 1
        if self.click_error is not None:
            raise self.click_error
        self.native_clicks += 1
        self._activate()

    def evaluate(self, script: str) -> None:
        if self.script_error is not None:
            raise self.script_error
        self.injected_clicks += 1
        self._activate()

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def text_content(self) -> str:
        return self.text

    def input_value(self) -> str:
        return self.value

    def fill(self, text: str) -> None:
        self.value = text

    def hover(self, timeout=None) -> None:
        self.hovered = True

    def drag_to(self, target: "FakeElement") -> None:
        self.dropped_on.append(target)

    def set_input_files(self, files) -> None:
        self.uploaded = files

    def _activate(self) -> None:
        if self.kind == "checkbox":
            self.checked = not self.checked
        elif self.kind == "radio":
            for member in self.group or [self]:
                member.checked = False
            self.checked = True
        if self.on_click is not None:
            self.on_click()


def radio_group(size: int) -> List[FakeElement]:
    group = [FakeElement(kind="radio") for _ in range(size)]
    for element in group:
        element.group = group
    return group


class _Matches:
    def __init__(self, element: Optional[FakeElement]):
        self._element = element

    def count(self) -> int:
        return 0 if self._element is None else 1

    @property
    def first(self) -> FakeElement:
        return self._element


class FakePage:
    """Selector-keyed elements plus a navigation stack."""

    def __init__(self, elements: Optional[Dict[str, FakeElement]] = None, title: str = ""):
        self.elements = dict(elements or {})
        self._title = title
        self.ready_state = "complete"
        self.history: List[str] = []
        self.position = -1
        self.reloads = 0

    @property
    def url(self) -> str:
        return self.history[self.position] if self.position >= 0 else "about:blank"

    def locator(self, selector: str) -> _Matches:
        return _Matches(self.elements.get(selector))

    def evaluate(self, script: str) -> str:
        return self.ready_state

    def title(self) -> str:
        return self._title

    def goto(self, url: str, wait_until=None) -> None:
        del self.history[self.position + 1:]
        self.history.append(url)
        self.position = len(self.history) - 1

    def go_back(self, wait_until=None) -> None:
        if self.position > 0:
            self.position -= 1

    def go_forward(self, wait_until=None) -> None:
        if self.position < len(self.history) - 1:
            self.position += 1

    def reload(self, wait_until=None) -> None:
        self.reloads += 1

    def screenshot(self, full_page: bool = False) -> bytes:
        return b"\x89PNG"


class FlickeringPage(FakePage):
    """Lookups match nothing while `detached(lookup_number)` is true."""

    def __init__(self, detached: Callable[[int], bool], elements: Optional[Dict[str, FakeElement]] = None):
        super().__init__(elements)
        self.detached = detached
        self.lookups = 0

    def locator(self, selector: str) -> _Matches:
        self.lookups += 1
        if self.detached(self.lookups):
            return _Matches(None)
        return super().locator(selector)


class FakeSessionManager:
    """Counts acquisitions; every session owns a FakePage."""

    def __init__(self):
        self.acquired = 0
        self.released = 0

    @contextmanager
    def session(self):
        self.acquired += 1
        session = SimpleNamespace(page=FakePage(), session_id=f"fake-{self.acquired}")
        try:
            yield session
        finally:
            self.released += 1


def playwright_error(message: str = "Element is not clickable") -> PlaywrightError:
    return PlaywrightError(message)
