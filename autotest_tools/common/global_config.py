"""
================================================================================
Global Configuration for Automation Tools
================================================================================

This module provides centralized configuration management for the UI suite,
including logging setup and configuration file loading.

Features:
    - YAML-based configuration loading
    - Environment-specific overlays (config/{ENV}.yaml)
    - Environment variable support (UI__BASE_URL overrides ui.base_url)
    - Centralized Loguru logging configuration

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Global configuration storage
_config: Dict[str, Any] = {}
_logger_initialized: bool = False

# Repository-level config directory
PROJECT_CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def init_logger(level: str = None, format_str: str = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    _ensure_config_loaded()

    log_level = level or get_config("logging.level", "INFO")
    log_format = format_str or get_config(
        "logging.format",
        "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    )

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = get_config("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level.upper(),
            format=log_format.replace("{level: <8}", "{level}"),  # Remove padding for file
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def _ensure_config_loaded() -> None:
    if not _config:
        _load_config()


def _candidate_config_dirs() -> List[Path]:
    override = os.getenv("UI_CONFIG_DIR")
    dirs = [Path(override)] if override else []
    return dirs + [Path("config"), PROJECT_CONFIG_DIR]


def _load_config(config_dir: Optional[Path] = None) -> None:
    """
    Loads configuration from YAML files and environment variables.

    Configuration loading order:
        1. Built-in defaults
        2. Default configuration file (config/config.yaml)
        3. Environment-specific configuration (config/{ENV}.yaml)
        4. Environment variables (override YAML settings)
    """
    global _config

    _config = _get_defaults()

    if config_dir is None:
        config_dir = next((d for d in _candidate_config_dirs() if d.exists()), None)

    if config_dir is None:
        logger.warning("No configuration directory found. Using defaults.")
    else:
        _config = _deep_merge(_config, _read_yaml(config_dir / "config.yaml"))

        env = os.getenv("ENVIRONMENT", os.getenv("ENV", "dev"))
        env_config = _read_yaml(config_dir / f"{env}.yaml")
        if env_config:
            _config = _deep_merge(_config, env_config)
            logger.debug(f"Merged environment config: {env}")

    _apply_env_overrides()


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    logger.debug(f"Loaded configuration from {path}")
    return data


def _get_defaults() -> Dict[str, Any]:
    """
    Returns default configuration values.
    """
    return {
        "logging": {
            "level": "INFO",
            "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        },
        "ui": {
            "base_url": "https://demo.guru99.com",
            "browser": "chromium",
            "headless": True,
            "timeout": 10.0,
            "poll_interval": 0.25,
            "native_click_timeout": 2.0,
            "invalid_email": "invalid_user@example.com",
            "invalid_password": "wrong_password",
        },
    }


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merges two dictionaries, with override taking precedence.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides() -> None:
    """
    Applies environment variable overrides to the configuration.

    Environment variable naming convention:
        - Use double underscore to separate nested keys
        - Example: UI__BASE_URL=https://staging.example.com overrides ui.base_url
    """
    for key, value in os.environ.items():
        if "__" in key and not key.startswith("__"):
            parts = [p.lower() for p in key.split("__")]
            _set_nested(_config, parts, value)


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """
    Sets a nested dictionary value using a list of keys.
    """
    for key in keys[:-1]:
        current = d.get(key)
        if not isinstance(current, dict):
            current = {}
            d[key] = current
        d = current
    d[keys[-1]] = value


def get_config(key: str, default: Any = None) -> Any:
    """
    Retrieves a configuration value using a dot-separated key path.

    Args:
        key: Dot-separated key path (e.g., "logging.level", "ui.base_url").
        default: Default value to return if key is not found.

    Returns:
        The configuration value, or the default if not found.

    Examples:
        >>> get_config("ui.base_url")
        'https://demo.guru99.com'
        >>> get_config("ui.timeout", 10)
        10.0
    """
    _ensure_config_loaded()

    value = _config
    for k in key.split("."):
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default

    return value


def set_config(key: str, value: Any) -> None:
    """
    Sets a configuration value at runtime.

    Args:
        key: Dot-separated key path.
        value: Value to set.
    """
    _ensure_config_loaded()
    _set_nested(_config, key.split("."), value)


def reload_config(config_dir: Optional[Path] = None) -> None:
    """
    Reloads the configuration from files.
    """
    global _logger_initialized
    _logger_initialized = False
    _load_config(config_dir)
    init_logger()
    logger.info("Configuration reloaded.")


def reset_config() -> None:
    """
    Drop loaded configuration so the next access reloads it.

    Useful for testing when configuration needs to be reloaded
    with different settings.
    """
    global _config
    _config = {}
