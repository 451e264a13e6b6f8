"""
E2E test package for the TodoMVC demo app.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Locator strategies using roles, labels, placeholders and data-testid
- Out-of-band checks of persisted localStorage state
"""
