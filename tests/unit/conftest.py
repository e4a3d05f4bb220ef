"""
Fixtures for driver tests that run without a browser.

The Playwright page is replaced with a ``MagicMock`` so the mirror-list
bookkeeping can be checked on its own. ``expect`` is patched in the driver
module because the real one only accepts genuine Playwright objects.
"""

from unittest.mock import MagicMock

import pytest

from todo_e2e.config import Config
from todo_e2e.pages import todo_app_page
from todo_e2e.pages.todo_app_page import ToDoApp


class UnitConfig(Config):
    """Configuration with a fixed URL and a short storage wait."""

    APP_URL = "http://todo.test/app"
    STORAGE_KEY = "react-todos"
    STORAGE_TIMEOUT_MS = 100


@pytest.fixture
def mock_page() -> MagicMock:
    page = MagicMock()
    page.url = UnitConfig.APP_URL
    return page


@pytest.fixture
def expect_mock(monkeypatch) -> MagicMock:
    mock = MagicMock()
    monkeypatch.setattr(todo_app_page, "expect", mock)
    return mock


@pytest.fixture
def todo_app(mock_page, expect_mock) -> ToDoApp:
    return ToDoApp(mock_page, settings=UnitConfig)
