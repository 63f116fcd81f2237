"""
Pydantic schemas for caller-facing input / output.

Kept in a single file for now; split per-domain when it grows.
Schemas are deliberately decoupled from the models so callers can
depend on a narrow shape while the stored record evolves.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ── Device ───────────────────────────────────────────────────────────
class AddDeviceRequest(BaseModel):
    mac_address: str | None = Field(default=None, max_length=64)
    user_agent: str | None = Field(default=None, max_length=512)
    ip_address: str | None = Field(default=None, max_length=64)
    device_name: str | None = Field(default=None, max_length=256)

    def to_kwargs(self) -> dict[str, str | None]:
        return self.model_dump()


class DeviceSessionOut(BaseModel):
    session_id: str
    device_name: str | None = None
    user_agent: str | None = None
    ip_address: str | None = None
    login_time: datetime
    last_activity: datetime
    is_active: bool

    model_config = {"from_attributes": True}


# ── Account ──────────────────────────────────────────────────────────
class AccountSummary(BaseModel):
    id: str | None = None
    group_id: int
    banned: bool
    ban_message: str | None = None
    expires_at: datetime
    active_device_count: int
    total_device_count: int

    model_config = {"from_attributes": True}
