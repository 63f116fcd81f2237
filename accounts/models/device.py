"""
Device session model: one login from one device/browser.

Design decisions:
- Sessions are never deleted. Logging out flips status to INACTIVE and
  the entry stays in the account's history.
- Status is an ENUM (ACTIVE → INACTIVE). There is no way back; a
  returning device gets a new session.
- ``is_active`` is derived from status. It is emitted on dump and
  accepted on load for records written before ``status`` existed.
"""

import enum
from datetime import datetime
from typing import Any

from pydantic import Field, computed_field, field_validator, model_validator

from accounts.models.base import Base, ensure_utc, new_session_id


class SessionStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class DeviceSession(Base):
    session_id: str = Field(default_factory=new_session_id)
    mac_address: str | None = None
    user_agent: str | None = None
    ip_address: str | None = None
    device_name: str | None = None
    login_time: datetime
    last_activity: datetime
    status: SessionStatus = SessionStatus.ACTIVE

    @model_validator(mode="before")
    @classmethod
    def _status_from_legacy_flag(cls, data: Any) -> Any:
        if isinstance(data, dict) and "status" not in data and "is_active" in data:
            data = dict(data)
            data["status"] = (
                SessionStatus.ACTIVE if data.pop("is_active") else SessionStatus.INACTIVE
            )
        return data

    @field_validator("login_time", "last_activity")
    @classmethod
    def _normalise_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _activity_not_before_login(self) -> "DeviceSession":
        if self.last_activity < self.login_time:
            raise ValueError("last_activity must not be earlier than login_time")
        return self

    @computed_field
    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.ACTIVE

    # ── Mutations (driven by AccountRecord) ──────────────────────────

    def touch(self, now: datetime) -> None:
        """Refresh last_activity; never moves it before login_time."""
        self.last_activity = max(ensure_utc(now), self.login_time)

    def deactivate(self, now: datetime) -> None:
        self.status = SessionStatus.INACTIVE
        self.touch(now)

    def __repr__(self) -> str:
        return f"<DeviceSession {self.session_id} device={self.device_name} status={self.status.value}>"
