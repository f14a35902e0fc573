"""
================================================================================
Shared Suite State
================================================================================

Artifacts produced by one test case and consumed by later cases in the same
suite run (registered account, completion flags).

One instance is created per suite run and handed to every case through its
context; nothing here is module-level state.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from loguru import logger


# Completion flags a case may own
COMPLETION_FLAGS = ("registration_completed", "login_completed")


@dataclass
class SharedTestState:
    """
    Producer/consumer record between dependency-chain cases.

    Attributes:
        registered_email: Email of the account created by registration
        registered_password: Password of that account
        registration_completed: Registration case finished successfully
        login_completed: Login case finished successfully
    """
    registered_email: Optional[str] = None
    registered_password: Optional[str] = None
    registration_completed: bool = False
    login_completed: bool = False

    def record_registration(self, email: str, password: str) -> None:
        """Store the registered account and mark registration complete."""
        self.registered_email = email
        self.registered_password = password
        self.registration_completed = True
        logger.info(f"Registration recorded for dependent cases: {email}")

    def record_login(self) -> None:
        """Mark login complete. Requires a recorded registration."""
        if not self.registration_completed:
            raise RuntimeError("Cannot record login before registration has completed")
        self.login_completed = True
        logger.info("Login recorded for dependent cases")

    def is_completed(self, flag: str) -> bool:
        if flag not in COMPLETION_FLAGS:
            raise KeyError(f"Unknown completion flag: {flag}")
        return bool(getattr(self, flag))

    def credentials(self) -> tuple[str, str]:
        """Registered (email, password). Raises if registration never completed."""
        if not self.registration_completed or self.registered_email is None or self.registered_password is None:
            raise RuntimeError("User registration data not available")
        return self.registered_email, self.registered_password

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if data["registered_password"] is not None:
            data["registered_password"] = "***MASKED***"
        return data


__all__ = [
    "COMPLETION_FLAGS",
    "SharedTestState",
]
