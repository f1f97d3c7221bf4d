"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Browser and page fixtures for the UI suite (sync Playwright, Chromium).

Tests are skipped when no Chromium build can be launched, e.g. before
`playwright install chromium` has been run.

================================================================================
"""

from typing import Generator

import pytest
from loguru import logger
from playwright.sync_api import Browser, Page, sync_playwright

from pageloader.playwright_element import PlaywrightPageUtils
from testsuites.ui_testing.pages.form_page import FORM_HTML, FormPO


@pytest.fixture(scope="session")
def browser() -> Generator[Browser, None, None]:
    """Session-scoped headless Chromium."""
    playwright = sync_playwright().start()
    try:
        browser = playwright.chromium.launch(headless=True)
    except Exception as e:
        playwright.stop()
        pytest.skip(f"Chromium is not available: {e}")
    logger.debug(f"Launched Chromium {browser.version}")
    yield browser
    browser.close()
    playwright.stop()


@pytest.fixture(scope="function")
def page(browser: Browser) -> Generator[Page, None, None]:
    """Fresh page per test, loaded with the signup form."""
    context = browser.new_context()
    page = context.new_page()
    page.set_content(FORM_HTML)
    yield page
    context.close()


@pytest.fixture
def page_utils(page: Page) -> PlaywrightPageUtils:
    return PlaywrightPageUtils(page, timeout=2000)


@pytest.fixture
def form(page_utils: PlaywrightPageUtils) -> FormPO:
    return FormPO.create(page_utils.by_tag("form"))
