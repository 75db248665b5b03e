"""Enquiry submitted from a listing card. Never persisted by the core."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, Field


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Enquiry(BaseModel):
    listing_id: Union[int, str]
    name: str
    email: str
    message: str
    timestamp: str = Field(default_factory=_utc_now_iso)
