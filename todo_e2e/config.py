"""
Suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local development, CI). Values are loaded from
environment variables with sensible defaults.
"""

import os


class Config:
    """Base configuration with default settings."""

    # Application under test
    APP_URL: str = os.environ.get("TODO_APP_URL", "https://demo.playwright.dev/todomvc")

    # localStorage key the application persists its list under
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    # Bounded waits, in milliseconds
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("TODO_STORAGE_TIMEOUT_MS", "5000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("TODO_EXPECT_TIMEOUT_MS", "5000"))

    SCREENSHOT_DIR: str = os.environ.get("SCREENSHOT_DIR", "test-results/screenshots")


class DevelopmentConfig(Config):
    """Local development configuration."""


class CIConfig(Config):
    """CI configuration with longer waits for shared runners."""

    STORAGE_TIMEOUT_MS: int = int(os.environ.get("TODO_STORAGE_TIMEOUT_MS", "15000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("TODO_EXPECT_TIMEOUT_MS", "10000"))


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, ci).
             If None, uses TODO_E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_E2E_ENV", "development")
    return config.get(env, config["default"])
