"""
Repository-level pytest configuration (showcase-safe).

Why this exists:
  - Provide safe defaults for demo environments (no secrets embedded)
  - Keep unit runs predictable regardless of the developer's shell
  - Keep behavior explicit and discoverable

Important:
  Values below are placeholders for the public Guru99 demo site.
  The invalid credentials are intentionally wrong.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.

    Keys use the SECTION__KEY override convention of the global config.
    """
    defaults = {
        "UI__BASE_URL": "https://demo.guru99.com",
        "UI__INVALID_EMAIL": "invalid_user@example.com",
        "UI__INVALID_PASSWORD": "wrong_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
