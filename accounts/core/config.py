"""
Package configuration.

All settings are loaded from environment variables (or a .env file).
Pydantic-settings validates and types every value on import, so a bad
device limit fails fast instead of at the first login.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────────────────
    APP_NAME: str = "Accounts"
    DEBUG: bool = False

    # ── Device sessions ──────────────────────────────────────────────
    # Active sessions allowed per account before the login flow has to
    # evict (or refuse) a device.
    MAX_ACTIVE_DEVICES: int = Field(default=3, ge=1)
    EVICT_OLDEST_ON_LIMIT: bool = True
    SESSION_INACTIVITY_TIMEOUT_MINUTES: int = Field(default=30, ge=1)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
