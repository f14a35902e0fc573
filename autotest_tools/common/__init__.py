"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config: Get configuration values by dot path
    - init_logger: Initialize loguru logger with standard settings

Usage:
    from autotest_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url")

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

# Export public API
__all__ = [
    "ConfigurationError",
    "get_config",
    "set_config",
    "init_logger",
    "reload_config",
    "reset_config",
]
