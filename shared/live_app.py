"""Reachability helpers for the TodoMVC app under test."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_app_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the app URL responds with 200."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app(url: str, timeout: int = 15, interval: int = 1) -> None:
    """Poll the app URL until it is reachable or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_reachable(url):
            logger.info("TodoMVC app reachable at %s", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"TodoMVC app at {url} not reachable after {timeout}s")
