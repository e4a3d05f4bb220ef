"""
Base Page class for the Page Object Model.

This class provides common functionality shared by page objects,
including navigation, history, waiting and URL assertions.
"""

import logging
import re

from playwright.sync_api import Locator, Page, expect

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        base_url: Base URL of the application.
    """

    def __init__(self, page: Page, base_url: str):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
        """
        self.page = page
        self.base_url = base_url

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.
        """
        url = f"{self.base_url}{path}"
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def reload(self) -> None:
        """Reload the current page."""
        logger.info("Reloading %s", self.page.url)
        self.page.reload()

    def go_back(self) -> None:
        """Navigate one step back in browser history."""
        logger.debug("Going back from %s", self.page.url)
        self.page.go_back()

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def wait_for_page_load(self) -> None:
        """Wait for page to finish loading."""
        self.page.wait_for_load_state("networkidle")

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def get_by_test_id(self, test_id: str) -> Locator:
        """
        Get element by data-testid attribute.

        Args:
            test_id: Value of the data-testid attribute.

        Returns:
            Locator for the element.
        """
        return self.page.get_by_test_id(test_id)
