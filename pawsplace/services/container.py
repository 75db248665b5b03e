"""Process-wide wiring of settings, Supabase client and services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..config import Settings, get_settings
from ..db.supabase_client import create_supabase_client
from .auth import AuthService
from .listings import ListingService
from .session import MockUserStore, SessionState


@dataclass
class Services:
    settings: Settings
    client: Any
    listings: ListingService
    auth: AuthService

    def new_session(self) -> SessionState:
        return SessionState(self.auth, MockUserStore(self.settings.mock_user_file))


def build_services(settings: Optional[Settings] = None, client: Any = None) -> Services:
    settings = settings or get_settings()
    if client is None:
        client = create_supabase_client(settings)
    return Services(
        settings=settings,
        client=client,
        listings=ListingService(settings, client),
        auth=AuthService(settings, client),
    )


_services_singleton: Optional[Services] = None


def get_services() -> Services:
    global _services_singleton
    if _services_singleton is None:
        _services_singleton = build_services()
    return _services_singleton


def reset_services() -> None:
    global _services_singleton
    _services_singleton = None
