from contextlib import contextmanager
from typing import Optional
import logging
import random
import time

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, sync_playwright

from . import config

logger = logging.getLogger(__name__)

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_5) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
]

AGE_MODAL = ".ageRestrictionModal_container"
AGE_CONFIRM_OPTION = '.ageRestrictionOptions_option :text("I am over 18 years old")'
AGE_CONTINUE_BUTTON = '.ageRestrictionModal_button :text("Continue")'
REGISTER_CLOSE_BUTTON = ".registerOrLogin_closeButton"
COOKIE_BANNER = ".acceptCookies"
COOKIE_ACCEPT_BUTTON = ".acceptCookies_button"


def _random_user_agent():
    return random.choice(USER_AGENTS)


def _jitter(min_s: float = 0.3, max_s: float = 1.2) -> float:
    return random.uniform(min_s, max_s)


@contextmanager
def open_page(headless: bool = None):
    """Launch chromium and yield a fresh page; the browser is closed on exit."""
    if headless is None:
        headless = config.HEADLESS
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless, args=["--disable-blink-features=AutomationControlled"])
        try:
            context = browser.new_context(
                user_agent=_random_user_agent(),
                locale="en-US",
                timezone_id=config.SITE_TIMEZONE,
                viewport={"width": 1280, "height": 720}
            )
            page = context.new_page()
            logger.info("Browser launched")
            yield page
        finally:
            browser.close()


def goto_with_retries(page: Page, url: str, attempts: int = 3):
    last_err = None
    for i in range(attempts):
        try:
            wait_until = "load" if i == 0 else "domcontentloaded"
            page.goto(url, wait_until=wait_until, timeout=30000)
            return True
        except PlaywrightError as e:
            last_err = e
            time.sleep(1.0 + i * 1.2 + _jitter(0.2, 0.8))
    logger.warning(f"Navigation failed after {attempts} attempts: {last_err}")
    return False


def probe(page: Page, selector: str, timeout: int = 5000) -> Optional[Locator]:
    """
    Wait up to `timeout` ms for `selector` to become visible.
    Returns the locator when present, None when it never shows up.
    """
    locator = page.locator(selector)
    try:
        locator.first.wait_for(state="visible", timeout=timeout)
    except PlaywrightError:
        return None
    return locator


def try_click(page: Page, selector: str, timeout: int = 2000) -> bool:
    try:
        page.locator(selector).first.click(timeout=timeout)
        return True
    except PlaywrightError:
        return False


def handle_age_verification(page: Page, timeout: int = 10000, expect_text: bool = False) -> bool:
    if probe(page, AGE_MODAL, timeout) is None:
        logger.info("Age verification modal not found or already handled.")
        return False
    if expect_text and "Age Verification" not in (page.locator("body").inner_text() or ""):
        logger.info("Age verification modal without the expected heading, skipping.")
        return False
    if try_click(page, AGE_CONFIRM_OPTION, timeout) and try_click(page, AGE_CONTINUE_BUTTON, timeout):
        logger.info("Handled age verification modal.")
        return True
    logger.info("Could not complete age verification.")
    return False


def close_register_modal(page: Page, timeout: int = 2000) -> bool:
    if try_click(page, REGISTER_CLOSE_BUTTON, timeout):
        logger.info("Closed register/login modal.")
        return True
    logger.info("Register/login modal not found.")
    return False


def accept_cookies(page: Page, timeout: int = 10000) -> bool:
    if probe(page, COOKIE_BANNER, timeout) is None:
        logger.info("Cookie banner not found or already handled.")
        return False
    if try_click(page, COOKIE_ACCEPT_BUTTON, timeout):
        logger.info("Accepted cookies.")
        return True
    logger.info("Cookie banner present but could not be accepted.")
    return False


def dismiss_modals(page: Page, modal_timeout: int = 10000, expect_age_text: bool = False):
    """Clear the onboarding overlays. None of these are required to be present."""
    handle_age_verification(page, modal_timeout, expect_text=expect_age_text)
    close_register_modal(page)
    accept_cookies(page, modal_timeout)


def capture_screenshot(page: Page, path) -> None:
    try:
        page.screenshot(path=str(path))
        logger.info(f"Saved screenshot to {path}")
    except PlaywrightError as e:
        logger.warning(f"Failed to capture screenshot: {e}")
