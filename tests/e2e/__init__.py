"""
Browser test package for the TodoMVC demo.

This package contains Playwright-based scenarios and demonstrates:
- Page Object Model (POM) pattern with an expected-state mirror
- Locator strategies using roles, labels, placeholders and data-testid
- Checking persisted localStorage alongside the rendered page
"""
