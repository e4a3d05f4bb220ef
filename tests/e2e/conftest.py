"""Playwright fixtures for TodoMVC E2E tests."""

from __future__ import annotations

import os
import time
from collections.abc import Generator

import pytest
import requests
from playwright.sync_api import Browser, BrowserContext, BrowserType, Page, expect
from playwright.sync_api import Error as PlaywrightError

from todo_e2e.config import Config
from todo_e2e.pages.todo_app_page import ToDoApp


def _wait_for_reachable(url: str, timeout: int = 30, interval: int = 1) -> bool:
    """Poll the application URL until it answers 200 or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        try:
            response = requests.get(url, timeout=5)
            if response.status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(interval)
    return False


@pytest.fixture(scope="session")
def todo_app_url(settings: type[Config]) -> str:
    """
    Return the URL of the application under test.

    Skips the E2E suite when the application cannot be reached, e.g. when
    running offline. Point TODO_APP_URL at a local copy to run without
    network access.
    """
    if not _wait_for_reachable(settings.APP_URL):
        pytest.skip(f"TodoMVC app at {settings.APP_URL} is not reachable")
    return settings.APP_URL


@pytest.fixture(scope="session", autouse=True)
def expect_timeout(settings: type[Config]) -> None:
    expect.set_options(timeout=settings.EXPECT_TIMEOUT_MS)


@pytest.fixture(scope="session")
def browser(
    browser_type: BrowserType, browser_type_launch_args: dict
) -> Generator[Browser, None, None]:
    try:
        browser = browser_type.launch(**browser_type_launch_args)
    except PlaywrightError as exc:
        pytest.skip(f"{browser_type.name} is not installed; run `playwright install` ({exc.message})")
    yield browser
    browser.close()


@pytest.fixture(scope="session")
def browser_context_args():
    return {
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def todo_app(page: Page, todo_app_url: str, settings: type[Config]) -> ToDoApp:
    """Driver bound to a fresh tab; scenarios call visit() themselves."""
    return ToDoApp(page, todo_app_url, settings)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        if page:
            screenshot_dir = item.funcargs.get("settings", Config).SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except Exception as exc:  # pragma: no cover - best effort logging
                print(f"\nFailed to capture screenshot: {exc}")
