"""Access to the ``profiles`` table keyed by auth user id."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..models.user import Profile, User
from ..utils.logging import get_logger

LOGGER = get_logger("db.profiles")

PROFILES_TABLE = "profiles"


def profile_from_user(user: User, now: Optional[str] = None) -> Profile:
    meta = user.metadata
    stamp = now or datetime.now(timezone.utc).isoformat()
    full_name = meta.full_name or meta.name
    if not full_name and (meta.first_name or meta.last_name):
        full_name = " ".join(part for part in (meta.first_name, meta.last_name) if part)
    return Profile(
        id=user.id,
        email=user.email,
        role=user.role,
        first_name=meta.first_name,
        last_name=meta.last_name,
        full_name=full_name,
        company=meta.company or meta.agency,
        phone=meta.phone,
        created_at=stamp,
        updated_at=stamp,
    )


class ProfileRepository:
    def __init__(self, client: Any) -> None:
        self.client = client

    def upsert_profile(self, user: User) -> Optional[Profile]:
        """Write the profile for a freshly signed-up user; ``None`` on failure."""
        if self.client is None:
            return None
        profile = profile_from_user(user)
        try:
            self.client.table(PROFILES_TABLE).upsert(profile.to_row()).execute()
        except Exception as exc:
            LOGGER.error("profile upsert failed user_id=%s: %s", user.id, exc)
            return None
        return profile

    def get_profile(self, user_id: str) -> Optional[Profile]:
        if self.client is None:
            return None
        try:
            response = self.client.table(PROFILES_TABLE).select("*").eq("id", user_id).limit(1).execute()
        except Exception as exc:
            LOGGER.error("profile lookup failed user_id=%s: %s", user_id, exc)
            return None
        rows = getattr(response, "data", None) or []
        if not rows:
            return None
        row: Dict[str, Any] = dict(rows[0])
        row["id"] = str(row.get("id"))
        if not row.get("role"):
            row.pop("role", None)
        for key in ("created_at", "updated_at"):
            if row.get(key) is not None:
                row[key] = str(row[key])
        return Profile.model_validate({k: v for k, v in row.items() if k in Profile.model_fields})
