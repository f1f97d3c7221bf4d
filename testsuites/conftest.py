"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the markers shared by the unit and UI suites and tags tests by
the directory they live in.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "unit: In-memory tests, no browser required"
    )
    config.addinivalue_line(
        "markers", "ui: Tests driving a real browser through Playwright"
    )


def pytest_collection_modifyitems(config, items):
    """Add suite markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "PageLoader Utilities Test Suite",
        "=" * 60,
        "",
    ]
