"""
Tests for the best-effort UI probes.
"""
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from schedule_monitor import browser


class StubLocator:

    def __init__(self, visible: bool, clicks: list, selector: str) -> None:
        self.visible = visible
        self.clicks = clicks
        self.selector = selector

    @property
    def first(self) -> "StubLocator":
        return self

    def wait_for(self, state: str = "visible", timeout: int = 0) -> None:
        if not self.visible:
            raise PlaywrightTimeoutError("not visible")

    def click(self, timeout: int = 0) -> None:
        if not self.visible:
            raise PlaywrightTimeoutError("not clickable")
        self.clicks.append(self.selector)

    def inner_text(self) -> str:
        return "Age Verification"


class StubPage:

    def __init__(self, visible_selectors) -> None:
        self.visible_selectors = set(visible_selectors)
        self.clicks = []

    def locator(self, selector: str) -> StubLocator:
        return StubLocator(selector in self.visible_selectors or selector == "body", self.clicks, selector)


class TestProbe:

    def test_absent_returns_none(self) -> None:
        assert browser.probe(StubPage([]), ".missing", timeout=10) is None

    def test_present_returns_locator(self) -> None:
        assert browser.probe(StubPage([".here"]), ".here", timeout=10) is not None

    def test_try_click_swallows_absence(self) -> None:
        page = StubPage([])
        assert browser.try_click(page, ".missing") is False
        assert page.clicks == []


class TestDismissModals:

    def test_nothing_present(self) -> None:
        page = StubPage([])
        browser.dismiss_modals(page, modal_timeout=10)
        assert page.clicks == []

    def test_all_modals_handled_in_order(self) -> None:
        page = StubPage([
            browser.AGE_MODAL,
            browser.AGE_CONFIRM_OPTION,
            browser.AGE_CONTINUE_BUTTON,
            browser.REGISTER_CLOSE_BUTTON,
            browser.COOKIE_BANNER,
            browser.COOKIE_ACCEPT_BUTTON,
        ])
        browser.dismiss_modals(page, modal_timeout=10, expect_age_text=True)
        assert page.clicks == [
            browser.AGE_CONFIRM_OPTION,
            browser.AGE_CONTINUE_BUTTON,
            browser.REGISTER_CLOSE_BUTTON,
            browser.COOKIE_ACCEPT_BUTTON,
        ]
