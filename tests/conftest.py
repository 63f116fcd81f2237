"""
Pytest configuration and fixtures.

Provides fixtures for:
- A manually advanced clock so timestamps are deterministic
- Accounts bound to that clock
- Settings isolation for the service-layer defaults
"""
from datetime import datetime, timedelta, timezone

import pytest

from accounts.core.config import settings
from accounts.models import AccountRecord

START = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_account(clock):
    """Factory for accounts bound to the fake clock."""

    def _make(**overrides) -> AccountRecord:
        fields = {
            "id": "acc-1",
            "expires_at": START + timedelta(days=30),
            "group_id": 2,
        }
        fields.update(overrides)
        return AccountRecord(**fields).use_clock(clock)

    return _make


@pytest.fixture
def account(make_account) -> AccountRecord:
    return make_account()


@pytest.fixture
def device_settings(monkeypatch):
    """Pin service defaults regardless of the local .env."""
    monkeypatch.setattr(settings, "MAX_ACTIVE_DEVICES", 3)
    monkeypatch.setattr(settings, "EVICT_OLDEST_ON_LIMIT", True)
    monkeypatch.setattr(settings, "SESSION_INACTIVITY_TIMEOUT_MINUTES", 30)
    return settings
