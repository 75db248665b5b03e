"""Environment-driven settings for PawsPlace.

Two values decide between live and mock mode: the Supabase project URL and
its public (anon) key. Missing values, or the placeholder strings used for
builds without credentials, switch every adapter to mock mode.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PLACEHOLDER_URL = "https://placeholder.supabase.co"
PLACEHOLDER_KEY = "placeholder-key"

DEFAULT_MOCK_USER_FILE = str(Path.home() / ".pawsplace" / "mock_user.json")


def _env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value.strip()
    return None


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    mock_user_file: str = DEFAULT_MOCK_USER_FILE
    search_debounce_ms: int = 300
    api_base_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        debounce = _env("SEARCH_DEBOUNCE_MS")
        return cls(
            supabase_url=_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
            supabase_key=_env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
            mock_user_file=_env("PAWSPLACE_MOCK_USER_FILE") or DEFAULT_MOCK_USER_FILE,
            search_debounce_ms=int(debounce) if debounce and debounce.isdigit() else 300,
            api_base_url=_env("API_BASE_URL"),
        )

    @property
    def mode(self) -> str:
        return "supabase" if is_configured(self) else "mock"


def is_configured(settings: Settings) -> bool:
    """True iff both credentials are set and neither is a placeholder."""

    url = settings.supabase_url
    key = settings.supabase_key
    return bool(url and key and url != PLACEHOLDER_URL and key != PLACEHOLDER_KEY)


def get_settings() -> Settings:
    return Settings.from_env()
