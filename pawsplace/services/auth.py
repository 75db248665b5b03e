"""Authentication primitives over Supabase auth with a mock-mode fallback."""

from __future__ import annotations

import inspect
import threading
import weakref
from typing import Any, Callable, Dict, List, Optional

from ..config import Settings, is_configured
from ..db.mappers import map_backend_user, session_user
from ..db.profiles import ProfileRepository
from ..models.user import (
    DEFAULT_ROLE,
    AuthResult,
    SignOutResult,
    User,
    UserMetadata,
    role_from_email,
)
from ..utils.logging import get_logger

LOGGER = get_logger("services.auth")

MOCK_USER_ID = "mock-user"
CLIENT_UNAVAILABLE = "Supabase client unavailable"

AuthListener = Callable[[str, Optional[User]], None]


def _error_message(exc: BaseException) -> str:
    return getattr(exc, "message", None) or str(exc) or exc.__class__.__name__


def mock_user(email: str, role: str, metadata: Optional[Dict[str, Any]] = None) -> User:
    data = dict(metadata or {})
    data["role"] = role
    return User(id=MOCK_USER_ID, email=email, metadata=UserMetadata.model_validate(data))


class AuthService:
    def __init__(self, settings: Settings, client: Any = None) -> None:
        self.settings = settings
        self.client = client
        self.profiles = ProfileRepository(client)
        self._listeners: List[Callable[[], Optional[AuthListener]]] = []
        self._subscription: Any = None
        self._lock = threading.Lock()

    @property
    def configured(self) -> bool:
        return is_configured(self.settings)

    def sign_up(
        self,
        email: str,
        password: str,
        role: str = DEFAULT_ROLE,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> AuthResult:
        if not self.configured:
            LOGGER.warning("Supabase not configured, using mock sign-up email=%s", email)
            return AuthResult(user=mock_user(email, role, metadata), mock_mode=True)
        if self.client is None:
            return AuthResult(error=CLIENT_UNAVAILABLE)

        data = dict(metadata or {})
        data["role"] = role
        try:
            response = self.client.auth.sign_up(
                {"email": email, "password": password, "options": {"data": data}}
            )
        except Exception as exc:
            LOGGER.error("sign_up failed email=%s: %s", email, exc)
            return AuthResult(error=_error_message(exc))

        user = map_backend_user(getattr(response, "user", None))
        if user is not None:
            self.profiles.upsert_profile(user)
        return AuthResult(user=user)

    def sign_in(self, email: str, password: str) -> AuthResult:
        if not self.configured:
            LOGGER.warning("Supabase not configured, using mock sign-in email=%s", email)
            return AuthResult(user=mock_user(email, role_from_email(email)), mock_mode=True)
        if self.client is None:
            return AuthResult(error=CLIENT_UNAVAILABLE)
        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as exc:
            LOGGER.error("sign_in failed email=%s: %s", email, exc)
            return AuthResult(error=_error_message(exc))
        return AuthResult(user=map_backend_user(getattr(response, "user", None)))

    def sign_out(self) -> SignOutResult:
        if not self.configured:
            return SignOutResult(mock_mode=True)
        if self.client is None:
            return SignOutResult(error=CLIENT_UNAVAILABLE)
        try:
            self.client.auth.sign_out()
        except Exception as exc:
            LOGGER.error("sign_out failed: %s", exc)
            return SignOutResult(error=_error_message(exc))
        return SignOutResult()

    def get_current_user(self) -> Optional[User]:
        if not self.configured or self.client is None:
            return None
        try:
            response = self.client.auth.get_user()
        except Exception as exc:
            LOGGER.error("get_current_user failed: %s", exc)
            return None
        if response is None:
            return None
        return map_backend_user(getattr(response, "user", None))

    def on_auth_state_change(self, callback: AuthListener) -> Callable[[], None]:
        """Register ``callback(event, user)`` for every future session change.

        ``user`` is ``None`` when the new session is empty. The backend
        subscription is opened once per service and shared by all listeners;
        bound methods are held weakly so a discarded session drops out on its
        own. The returned callable unsubscribes; it is a no-op in mock mode.
        """

        if not self.configured or self.client is None:
            return lambda: None

        if inspect.ismethod(callback):
            ref: Callable[[], Optional[AuthListener]] = weakref.WeakMethod(callback)
        else:
            def ref() -> Optional[AuthListener]:
                return callback

        with self._lock:
            self._listeners.append(ref)
            if self._subscription is None:
                self._subscription = self.client.auth.on_auth_state_change(self._dispatch)

        def _unsubscribe() -> None:
            with self._lock:
                if ref in self._listeners:
                    self._listeners.remove(ref)
                self._close_if_idle()

        return _unsubscribe

    @property
    def listener_count(self) -> int:
        with self._lock:
            self._listeners = [ref for ref in self._listeners if ref() is not None]
            return len(self._listeners)

    def _dispatch(self, event: Any, session: Any) -> None:
        name = str(getattr(event, "value", event))
        user = session_user(session)
        with self._lock:
            listeners = [ref() for ref in self._listeners]
            self._listeners = [ref for ref, cb in zip(self._listeners, listeners) if cb is not None]
            self._close_if_idle()
        for callback in listeners:
            if callback is not None:
                callback(name, user)

    def _close_if_idle(self) -> None:
        # caller holds the lock
        if not self._listeners and self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
