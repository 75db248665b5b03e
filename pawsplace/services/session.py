"""Session and role state shared by the front end.

The state has a single writer: :meth:`SessionState.start` (startup sync and
the auth-change subscription it installs) and :meth:`update_auth_state`, the
manual setter used in mock mode. Readers only see properties.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from ..models.user import AuthResult, Profile, Role, SignOutResult, User, derive_role
from ..utils.logging import get_logger
from .auth import AuthService

LOGGER = get_logger("services.session")


class MockUserStore:
    """Mock-mode user kept in one JSON file on the machine running the app.

    The file is not per browser: under a shared Streamlit server every new
    visitor session restores whichever mock user logged in last.
    """

    def __init__(self, path: str) -> None:
        self.path = Path(path)

    def load(self) -> Optional[User]:
        if not self.path.exists():
            return None
        try:
            return User.model_validate(json.loads(self.path.read_text(encoding="utf-8")))
        except (OSError, ValueError, ValidationError) as exc:
            LOGGER.error("Error parsing mock user data path=%s: %s", self.path, exc)
            self.clear()
            return None

    def save(self, user: User) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(user.model_dump_json(), encoding="utf-8")

    def clear(self) -> None:
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass


class SessionState:
    def __init__(self, auth: AuthService, store: MockUserStore) -> None:
        self.auth = auth
        self.store = store
        self._user: Optional[User] = None
        self._role: Optional[str] = None
        self._loading = True
        self._profile: Optional[Profile] = None
        self._profile_for: Optional[str] = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read side
    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def role(self) -> Optional[str]:
        return self._role

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._role == Role.ADMIN.value

    @property
    def is_agent(self) -> bool:
        return self._role == Role.AGENT.value

    @property
    def is_tenant(self) -> bool:
        return self._role == Role.TENANT.value

    @property
    def profile(self) -> Optional[Profile]:
        """``profiles`` row of the signed-in user, read once per user id."""
        user = self._user
        if user is None or not self.auth.configured:
            return None
        if self._profile_for != user.id:
            self._profile = self.auth.profiles.get_profile(user.id)
            self._profile_for = user.id
        return self._profile

    # ------------------------------------------------------------------
    # Write side
    def start(self) -> Callable[[], None]:
        """Sync from the backend and return the unsubscribe callable."""

        user = self.auth.get_current_user()
        self._set(user, derive_role(user))

        unsubscribe: Callable[[], None] = lambda: None
        if self.auth.configured:
            unsubscribe = self.auth.on_auth_state_change(self._on_auth_change)
        elif self._user is None:
            stored = self.store.load()
            if stored is not None:
                LOGGER.info("restored mock user email=%s", stored.email)
                self._set(stored, stored.role)

        self._loading = False
        return unsubscribe

    def update_auth_state(self, user: Optional[User], role: Optional[str]) -> None:
        self._set(user, role)
        self._loading = False

    def _on_auth_change(self, event: str, user: Optional[User]) -> None:
        LOGGER.info("auth state change event=%s", event)
        self.update_auth_state(user, derive_role(user))

    def _set(self, user: Optional[User], role: Optional[str]) -> None:
        with self._lock:
            self._user = user
            self._role = role

    # ------------------------------------------------------------------
    # Login / logout flows used by the pages
    def login(self, email: str, password: str) -> AuthResult:
        result = self.auth.sign_in(email, password)
        if result.error is None and result.mock_mode and result.user is not None:
            self.update_auth_state(result.user, result.user.role)
            self.store.save(result.user)
        return result

    def logout(self) -> SignOutResult:
        result = self.auth.sign_out()
        if result.error is not None:
            LOGGER.error("Error signing out: %s", result.error)
        elif result.mock_mode:
            self.update_auth_state(None, None)
        self.store.clear()
        return result
