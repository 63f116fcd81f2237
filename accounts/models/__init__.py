"""
Models package. Re-exports so callers can write
``from accounts.models import AccountRecord``.
"""

from accounts.models.account import AccountRecord
from accounts.models.base import Base
from accounts.models.device import DeviceSession, SessionStatus

__all__ = [
    "Base",
    "AccountRecord",
    "DeviceSession",
    "SessionStatus",
]
