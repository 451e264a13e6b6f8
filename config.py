"""
Test suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local, CI, debugging). Values are loaded
from environment variables with sensible defaults, so the same suite
can target the public demo or a locally served TodoMVC build.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

DEFAULT_TODO_ITEMS: tuple[str, ...] = (
    "buy some cheese",
    "feed the cat",
    "book a doctors appointment",
)


class Config:
    """Base configuration with default settings."""

    APP_URL: str = os.environ.get("TODO_APP_URL", "https://demo.playwright.dev/todomvc")

    # Key under which the app mirrors its todos into localStorage
    STORAGE_KEY: str = os.environ.get("TODO_STORAGE_KEY", "react-todos")

    NEW_TODO_PLACEHOLDER: str = "What needs to be done?"

    # Timeouts (milliseconds unless noted otherwise)
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "5000"))
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("E2E_STORAGE_TIMEOUT_MS", "5000"))
    STATE_TIMEOUT_MS: int = int(os.environ.get("E2E_STATE_TIMEOUT_MS", "2000"))
    APP_WAIT_SECONDS: int = int(os.environ.get("E2E_APP_WAIT_SECONDS", "15"))

    SCREENSHOT_DIR: str = os.environ.get(
        "E2E_SCREENSHOT_DIR",
        str(BASE_DIR / "test-results" / "screenshots"),
    )

    TODO_ITEMS: tuple[str, ...] = DEFAULT_TODO_ITEMS


class CIConfig(Config):
    """CI configuration: shared runners are slower, so wait longer."""

    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "10000"))
    STORAGE_TIMEOUT_MS: int = int(os.environ.get("E2E_STORAGE_TIMEOUT_MS", "10000"))
    APP_WAIT_SECONDS: int = int(os.environ.get("E2E_APP_WAIT_SECONDS", "60"))


class DebugConfig(Config):
    """Debugging configuration for headed runs stepped through by hand."""

    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "30000"))
    STATE_TIMEOUT_MS: int = int(os.environ.get("E2E_STATE_TIMEOUT_MS", "10000"))


# Configuration mapping for easy access
config = {
    "local": Config,
    "ci": CIConfig,
    "debug": DebugConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci, debug).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "local")
    return config.get(env, config["default"])
