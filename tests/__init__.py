"""
Test suite for the TodoMVC page-object model.

This package contains:
- unit/: Model and driver bookkeeping tests against a mocked page
- e2e/: Browser scenarios against the live TodoMVC demo using Playwright
"""
