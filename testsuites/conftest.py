"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers.

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

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "unit: Framework tests using fakes, no browser"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests (live browser)"
    )
    config.addinivalue_line(
        "markers", "live: Requires network access to the demo site (UI_LIVE=1)"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds domain markers by directory.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Guru99 UI Automation Framework",
        "=" * 60,
        "",
    ]
