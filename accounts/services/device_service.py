"""
Device service: login-time registration & lifecycle helpers for an
account's device sessions.

Handles:
- Registering a new device with active-device limit enforcement
  (evict the oldest session, or refuse)
- Ending / refreshing single sessions (logout, heartbeat)
- Deactivating every session (force logout, ban)
- Expiring sessions idle past the inactivity timeout

The model stays total (boolean results); refusals that a caller must
act on are raised as ``AccountError`` subclasses here.
"""

import logging
from datetime import timedelta

from accounts.core.config import settings
from accounts.core.exceptions import AccountBannedError, DeviceLimitExceededError
from accounts.models.account import AccountRecord
from accounts.models.base import ensure_utc
from accounts.models.device import DeviceSession
from accounts.schemas import AccountSummary, AddDeviceRequest, DeviceSessionOut

logger = logging.getLogger(__name__)


# ── Queries ──────────────────────────────────────────────────────────

def get_active_devices(account: AccountRecord) -> list[DeviceSession]:
    """Return all active sessions for an account."""
    return account.active_devices()


def list_devices(account: AccountRecord, *, active_only: bool = False) -> list[DeviceSessionOut]:
    devices = account.active_devices() if active_only else account.devices
    return [DeviceSessionOut.model_validate(d) for d in devices]


def summarize(account: AccountRecord) -> AccountSummary:
    return AccountSummary.model_validate(account)


# ── Login ────────────────────────────────────────────────────────────

def register_device(
    account: AccountRecord,
    request: AddDeviceRequest | None = None,
    *,
    max_devices: int | None = None,
    evict_oldest: bool | None = None,
) -> DeviceSession:
    """
    Open a new session, making room under the active-device limit.

    With eviction enabled the oldest active sessions are ended until
    the new one fits; otherwise ``DeviceLimitExceededError`` is raised
    and the account is left untouched.
    """
    if max_devices is None:
        max_devices = settings.MAX_ACTIVE_DEVICES
    if evict_oldest is None:
        evict_oldest = settings.EVICT_OLDEST_ON_LIMIT
    if max_devices < 1:
        raise ValueError("max_devices must be at least 1")

    if account.banned:
        logger.warning("Refused device for banned account %s", account.id)
        raise AccountBannedError(account.id, account.ban_message)

    if account.is_device_limit_exceeded(max_devices):
        if not evict_oldest:
            raise DeviceLimitExceededError(
                account.id, max_devices, account.active_device_count,
            )
        evicted = 0
        while account.is_device_limit_exceeded(max_devices) and account.remove_oldest_device():
            evicted += 1
        logger.info(
            "Evicted %d oldest session(s) for account %s (limit %d)",
            evicted, account.id, max_devices,
        )

    request = request or AddDeviceRequest()
    device = account.add_device(**request.to_kwargs())
    logger.debug("Registered session %s for account %s", device.session_id, account.id)
    return device


# ── Single session ───────────────────────────────────────────────────

def end_session(account: AccountRecord, session_id: str) -> bool:
    """Mark a single session as inactive (logout)."""
    ended = account.remove_device(session_id)
    if not ended:
        logger.info("Logout for unknown session %s on account %s", session_id, account.id)
    return ended


def touch_session(account: AccountRecord, session_id: str) -> bool:
    """Heartbeat: refresh last_activity of an active session."""
    return account.update_last_activity(session_id)


# ── Bulk ─────────────────────────────────────────────────────────────

def deactivate_all_devices(account: AccountRecord) -> int:
    """
    Deactivate every active session for an account.

    Returns the number of sessions affected.
    Used by force-logout and ban flows.
    """
    active = account.active_devices()
    now = account.clock.now()
    for device in active:
        device.deactivate(now)
    if active:
        logger.info("Force-logged out %d session(s) for account %s", len(active), account.id)
    return len(active)


def expire_idle_devices(account: AccountRecord, timeout_minutes: int | None = None) -> int:
    """End active sessions idle longer than the timeout; returns the count."""
    if timeout_minutes is None:
        timeout_minutes = settings.SESSION_INACTIVITY_TIMEOUT_MINUTES
    now = ensure_utc(account.clock.now())
    cutoff = now - timedelta(minutes=timeout_minutes)

    stale = [d for d in account.active_devices() if d.last_activity < cutoff]
    for device in stale:
        device.deactivate(now)
    if stale:
        logger.info("Expired %d idle session(s) for account %s", len(stale), account.id)
    return len(stale)


# ── Ban ──────────────────────────────────────────────────────────────

def ban_account(account: AccountRecord, message: str | None = None) -> int:
    """Block the account and invalidate all of its sessions."""
    account.banned = True
    account.ban_message = message
    logger.warning("Account %s banned: %s", account.id, message or "(no reason given)")
    return deactivate_all_devices(account)


def unban_account(account: AccountRecord) -> None:
    """Lift the block. Ended sessions stay ended."""
    account.banned = False
    account.ban_message = None
    logger.info("Account %s unbanned", account.id)
