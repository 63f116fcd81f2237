"""
Account model: identity, ban state, role and device sessions.

Design decisions:
- The device list is append-only. "Removing" a device marks its
  session INACTIVE; history is kept in insertion order.
- Counts are computed from the list on every read, never stored.
- Timestamps come from an injected ``Clock`` held as a private
  attribute, so it is never serialized.
- Every device operation is total: "not found" and "nothing active"
  come back as ``False``.

Not thread-safe. Callers that share an instance across threads must
hold their own lock around mutations.
"""

from datetime import datetime

from pydantic import Field, JsonValue, PrivateAttr, computed_field, field_validator, model_validator

from accounts.core.clock import SYSTEM_CLOCK, Clock
from accounts.models.base import Base, ensure_utc, new_session_id
from accounts.models.device import DeviceSession, SessionStatus


class AccountRecord(Base):
    id: str | None = None
    alternate_ids: list[str] = Field(default_factory=list)
    has_password: bool = False
    expires_at: datetime
    group_id: int = 0
    banned: bool = False
    ban_message: str | None = None
    comment: str | None = None
    params: dict[str, JsonValue] | None = None
    devices: list[DeviceSession] = Field(default_factory=list)

    _clock: Clock = PrivateAttr(default=SYSTEM_CLOCK)

    @field_validator("expires_at")
    @classmethod
    def _normalise_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _unique_session_ids(self) -> "AccountRecord":
        seen: set[str] = set()
        for device in self.devices:
            if device.session_id in seen:
                raise ValueError(f"duplicate session_id {device.session_id!r}")
            seen.add(device.session_id)
        return self

    # ── Clock ────────────────────────────────────────────────────────

    @property
    def clock(self) -> Clock:
        return self._clock

    def use_clock(self, clock: Clock) -> "AccountRecord":
        """Swap the time source; returns self for chaining after load."""
        self._clock = clock
        return self

    # ── Derived counts ───────────────────────────────────────────────

    @computed_field
    @property
    def active_device_count(self) -> int:
        return sum(1 for d in self.devices if d.is_active)

    @computed_field
    @property
    def total_device_count(self) -> int:
        return len(self.devices)

    # ── Queries ──────────────────────────────────────────────────────

    def get_device(self, session_id: str) -> DeviceSession | None:
        """First session with this id, active or not."""
        for device in self.devices:
            if device.session_id == session_id:
                return device
        return None

    def active_devices(self) -> list[DeviceSession]:
        return [d for d in self.devices if d.is_active]

    # ── Device operations ────────────────────────────────────────────

    def add_device(
        self,
        mac_address: str | None = None,
        user_agent: str | None = None,
        ip_address: str | None = None,
        device_name: str | None = None,
    ) -> DeviceSession:
        """Append a new ACTIVE session stamped with the current time."""
        now = ensure_utc(self._clock.now())
        device = DeviceSession(
            session_id=new_session_id(),
            mac_address=mac_address,
            user_agent=user_agent,
            ip_address=ip_address,
            device_name=device_name,
            login_time=now,
            last_activity=now,
            status=SessionStatus.ACTIVE,
        )
        self.devices.append(device)
        return device

    def remove_device(self, session_id: str) -> bool:
        """
        End the session with this id.

        Matches regardless of current status, so ending an already
        ended session succeeds again and only re-stamps last_activity.
        """
        device = self.get_device(session_id)
        if device is None:
            return False
        device.deactivate(self._clock.now())
        return True

    def update_last_activity(self, session_id: str) -> bool:
        """Refresh an ACTIVE session; inactive sessions are not matched."""
        for device in self.devices:
            if device.session_id == session_id and device.is_active:
                device.touch(self._clock.now())
                return True
        return False

    def is_device_limit_exceeded(self, max_devices: int) -> bool:
        """True once active sessions are at or above ``max_devices``."""
        return self.active_device_count >= max_devices

    def remove_oldest_device(self) -> bool:
        """
        End the ACTIVE session with the earliest login_time.

        ``min`` keeps the first of equal keys, so ties go to the
        session added first.
        """
        active = self.active_devices()
        if not active:
            return False
        oldest = min(active, key=lambda d: d.login_time)
        oldest.deactivate(self._clock.now())
        return True

    def __repr__(self) -> str:
        return (
            f"<AccountRecord {self.id} group={self.group_id} "
            f"devices={self.active_device_count}/{self.total_device_count}>"
        )
