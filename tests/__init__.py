"""
Test suite for the TodoMVC demo app.

This package contains:
- e2e/: Browser scenarios using Playwright and the page objects in e2e/pages
- unit/: Browser-free tests of the page objects and shared helpers
"""
