"""
================================================================================
Autotest Tools
================================================================================

Infrastructure utilities shared by the UI suite.

Modules:
    - common: Shared configuration and Loguru logging setup
    - report_tools: Allure attachments and suite report output

Example:
    from autotest_tools.common import get_config, init_logger
    from autotest_tools.report_tools.allure_utils import attach_suite_report

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
