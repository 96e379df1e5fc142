"""
Generic test frameworks package.

Keeps the API and UI frameworks importable as one package to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports

Subpackages:
  - common: configuration loader, logging setup, name registry
  - api_testing: HTTP client, response validator, user API wrapper
  - ui_testing: browser session, page objects, page factory
"""
