"""
Out-of-band verification of the todos the app persists in localStorage.

The app mirrors its state into ``localStorage[<key>]`` as a JSON array of
``{"title": ..., "completed": ...}`` records. This code never writes that
key; it only reads it, or polls it from inside the page until a condition
holds, so assertions stay in step with the app's asynchronous saves.
"""

from __future__ import annotations

import json
import logging
from typing import TypedDict

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


class TodoRecord(TypedDict):
    """One persisted todo.

    Attributes:
        title: The todo text as committed by the app.
        completed: Whether the todo is marked as done.
    """

    title: str
    completed: bool


_COUNT_JS = "([key, expected]) => JSON.parse(localStorage[key] || '[]').length === expected"

_COMPLETED_COUNT_JS = (
    "([key, expected]) => JSON.parse(localStorage[key] || '[]')"
    ".filter(todo => todo.completed).length === expected"
)

_TITLE_JS = (
    "([key, title]) => JSON.parse(localStorage[key] || '[]')"
    ".map(todo => todo.title).includes(title)"
)


class LocalStorage:
    """
    Reader and waiter for the app's persisted todos.

    Attributes:
        page: Playwright page the app is loaded in.
        key: localStorage key the app writes to.
        timeout_ms: Maximum time a wait_for_* call polls for.
    """

    def __init__(self, page: Page, key: str, timeout_ms: int = 5000):
        self.page = page
        self.key = key
        self.timeout_ms = timeout_ms

    def read(self) -> list[TodoRecord]:
        """
        Read the stored todos.

        Returns:
            Stored records in app order, or an empty list if the key is absent.
        """
        raw = self.page.evaluate("key => window.localStorage.getItem(key)", self.key)
        if raw is None:
            return []
        return json.loads(raw)

    def titles(self) -> list[str]:
        """Titles of the stored todos, in order."""
        return [record["title"] for record in self.read()]

    def wait_for_count(self, expected: int) -> None:
        """Wait until exactly ``expected`` todos are stored."""
        logger.debug("Waiting for %d stored todos under %r", expected, self.key)
        self._wait(_COUNT_JS, expected)

    def wait_for_completed_count(self, expected: int) -> None:
        """Wait until exactly ``expected`` stored todos are completed."""
        logger.debug("Waiting for %d completed stored todos under %r", expected, self.key)
        self._wait(_COMPLETED_COUNT_JS, expected)

    def wait_for_title(self, title: str) -> None:
        """Wait until a stored todo carries ``title``."""
        logger.debug("Waiting for stored todo titled %r under %r", title, self.key)
        self._wait(_TITLE_JS, title)

    def _wait(self, expression: str, value: int | str) -> None:
        # Raises playwright TimeoutError when the condition never holds
        self.page.wait_for_function(expression, arg=[self.key, value], timeout=self.timeout_ms)
