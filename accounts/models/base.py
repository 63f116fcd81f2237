"""
Shared pydantic base & helpers for all models.

Every model gets:
- Unknown input keys ignored, which is how derived fields (counts,
  ``is_active``) are dropped when a serialized record is loaded back.
- UTC-normalised timestamps via ``ensure_utc``.

Using a common base keeps individual model files focused on domain fields.
"""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel


def new_session_id() -> str:
    """128-bit random identifier in canonical string form."""
    return str(uuid.uuid4())


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Base(BaseModel):
    """Pydantic base; all models inherit from this."""

    model_config = {"extra": "ignore"}
