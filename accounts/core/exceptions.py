"""
Domain exceptions raised by the service layer.

Model methods never raise for routine outcomes (unknown session id,
nothing left to evict); they return ``False``. These exceptions are for
flows where the caller asked for something the account state forbids.
"""


class AccountError(Exception):
    """Base error for account operations."""
    pass


class AccountBannedError(AccountError):
    """The account is blocked; new sessions are refused."""

    def __init__(self, account_id: str | None, ban_message: str | None = None) -> None:
        self.account_id = account_id
        self.ban_message = ban_message
        detail = f"Account {account_id} is banned"
        if ban_message:
            detail = f"{detail}: {ban_message}"
        super().__init__(detail)


class DeviceLimitExceededError(AccountError):
    """The active-device limit is reached and eviction is disabled."""

    def __init__(self, account_id: str | None, max_devices: int, active_devices: int) -> None:
        self.account_id = account_id
        self.max_devices = max_devices
        self.active_devices = active_devices
        super().__init__(
            f"Account {account_id} has {active_devices} active devices "
            f"(limit {max_devices})"
        )
