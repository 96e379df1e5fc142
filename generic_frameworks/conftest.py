"""
================================================================================
Framework Pytest Configuration
================================================================================

Registers the project-wide markers and tags collected tests by the directory
they live in (api_testing, ui_testing, unit).

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "api: API-specific tests"
    )
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )
    config.addinivalue_line(
        "markers", "unit: Offline framework tests (no network, no browser)"
    )
    config.addinivalue_line(
        "markers", "requires_external: Drives a live service; runs only with RUN_EXTERNAL_TESTS=1"
    )


def pytest_collection_modifyitems(config, items):
    """Tag tests with their domain marker based on location."""
    for item in items:
        path = str(item.fspath)

        if "api_testing" in path:
            item.add_marker(pytest.mark.api)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)

        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Generic API & UI Test Frameworks",
        "=" * 60,
        "",
    ]
