"""
Time source for model mutations.

Models never call ``datetime.now`` directly; they ask a ``Clock``.
Production code uses ``SYSTEM_CLOCK``; tests swap in a clock they can
advance by hand.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, always timezone-aware UTC. All instances are equal."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SystemClock)

    def __hash__(self) -> int:
        return hash(SystemClock)

    def __repr__(self) -> str:
        return "<SystemClock>"


SYSTEM_CLOCK = SystemClock()
