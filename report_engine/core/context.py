# report_engine/core/context.py
"""Requester identity and clock used to stamp generated reports."""

import getpass
import os
from datetime import datetime, timezone
from typing import Optional


def system_username() -> str:
    """OS user running the service, resolved cross-platform."""
    try:
        return (
            os.environ.get("USER")
            or os.environ.get("USERNAME")
            or getpass.getuser()
            or "unknown_user"
        )
    except Exception:
        return "unknown_user"


class UserContext:
    """Identity of the requester; falls back to the service's OS user."""

    def __init__(self, user: Optional[str] = None):
        self.user = user

    def current_user(self) -> str:
        return self.user or system_username()


class SystemClock:
    """UTC wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
