"""
================================================================================
Allure Report Utilities
================================================================================

This module provides utilities for enhancing Allure reports produced by the
UI suite: JSON/text attachments, failure screenshots and the suite summary.

Features:
- Custom attachment helpers
- Failure screenshot capture
- Suite report attachment and console summary

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_failure_screenshot(page: Any, name: str = "failure_screenshot") -> Optional[bytes]:
    """
    Capture a full-page screenshot and attach it to the report.

    Capture problems are logged and never mask the failure that triggered
    the capture.

    Args:
        page: Playwright page of the failing session
        name: Attachment name

    Returns:
        PNG bytes, or None if capture failed
    """
    try:
        screenshot = page.screenshot(full_page=True)
    except PlaywrightError as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")
        return None

    allure.attach(
        screenshot,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
    return screenshot


# ================================================================================
# Suite Report
# ================================================================================

def attach_suite_report(report: Dict[str, Any], name: str = "Suite Report"):
    """
    Attach a suite report dictionary plus a readable summary.

    Args:
        report: Output of SuiteReport.to_dict()
        name: Attachment name
    """
    attach_json(report, name=name)
    attach_text(format_summary(report), name=f"{name} Summary")


def write_suite_report(report: Dict[str, Any], path: Path) -> Path:
    """
    Write a suite report dictionary to disk as JSON.

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    logger.info(f"Suite report written to {path}")
    return path


def format_summary(report: Dict[str, Any]) -> str:
    """Render a suite report dictionary as a console table."""
    status_marks = {"passed": "✅", "failed": "❌", "skipped": "⏭️"}

    lines = [
        "=" * 60,
        "TEST EXECUTION SUMMARY",
        "=" * 60,
    ]
    for case in report.get("cases", []):
        mark = status_marks.get(case["status"], "?")
        line = f"{mark} {case['case_id']:<36} {case['status'].upper():<8} {case['duration']:.2f}s"
        lines.append(line)
        error = case.get("error")
        if error:
            lines.append(f"     [{error['kind']}] {error['message']}")
        elif case.get("skip_reason"):
            lines.append(f"     {case['skip_reason']}")
    lines.extend([
        "-" * 60,
        f"Total Tests:    {report.get('total', 0)}",
        f"Passed:         {report.get('passed', 0)}",
        f"Failed:         {report.get('failed', 0)}",
        f"Skipped:        {report.get('skipped', 0)}",
        f"Duration:       {report.get('duration', 0.0):.2f}s",
        "=" * 60,
    ])
    return "\n".join(lines)
