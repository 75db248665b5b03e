import gc
import json
from types import SimpleNamespace

from conftest import FakeSupabaseClient
from pawsplace.models.user import User
from pawsplace.services.auth import AuthService
from pawsplace.services.session import MockUserStore, SessionState


def _session(settings, client=None) -> SessionState:
    return SessionState(AuthService(settings, client), MockUserStore(settings.mock_user_file))


def test_initial_state_is_loading(mock_settings):
    state = _session(mock_settings)
    assert state.loading is True
    assert state.user is None
    assert state.role is None
    assert state.is_authenticated is False


def test_mock_startup_without_stored_user(mock_settings):
    state = _session(mock_settings)
    unsubscribe = state.start()
    assert state.loading is False
    assert state.is_authenticated is False
    unsubscribe()


def test_mock_login_persists_and_restores(mock_settings):
    state = _session(mock_settings)
    state.start()
    result = state.login("agent@example.com", "pw")
    assert result.mock_mode is True
    assert state.is_authenticated
    assert state.role == "agent"
    assert state.is_agent and not state.is_admin and not state.is_tenant

    restored = _session(mock_settings)
    restored.start()
    assert restored.user.email == "agent@example.com"
    assert restored.role == "agent"


def test_mock_logout_clears_state_and_store(mock_settings):
    state = _session(mock_settings)
    state.start()
    state.login("admin@example.com", "pw")
    assert state.is_admin
    state.logout()
    assert state.user is None
    assert state.role is None
    assert not MockUserStore(mock_settings.mock_user_file).path.exists()

    fresh = _session(mock_settings)
    fresh.start()
    assert fresh.is_authenticated is False


def test_corrupt_store_entry_is_dropped(mock_settings, tmp_path):
    path = tmp_path / "mock_user.json"
    path.write_text("{not json", encoding="utf-8")
    state = _session(mock_settings)
    state.start()
    assert state.user is None
    assert not path.exists()


def test_stored_user_role_comes_from_metadata(mock_settings, tmp_path):
    stored = {"id": "mock-user", "email": "t@example.com", "metadata": {}}
    (tmp_path / "mock_user.json").write_text(json.dumps(stored), encoding="utf-8")
    state = _session(mock_settings)
    state.start()
    assert state.role == "tenant"
    assert state.is_tenant


def test_update_auth_state_sets_both_fields(mock_settings):
    state = _session(mock_settings)
    user = User(id="u1", email="x@example.com")
    state.update_auth_state(user, "admin")
    assert state.user is user
    assert state.role == "admin"
    assert state.loading is False
    state.update_auth_state(None, None)
    assert state.user is None and state.role is None


def test_live_startup_uses_current_user_and_subscription(live_settings, fake_client, tmp_path):
    # a stored mock user must be ignored while configured
    (tmp_path / "mock_user.json").write_text(
        json.dumps({"id": "mock-user", "email": "m@example.com", "metadata": {"role": "admin"}}), encoding="utf-8"
    )
    fake_client.auth.current_user = {"id": "u1", "email": "t@example.com", "user_metadata": {"role": "agent"}}
    state = _session(live_settings, fake_client)
    unsubscribe = state.start()
    assert state.loading is False
    assert state.user.id == "u1"
    assert state.role == "agent"

    fake_client.auth.emit("SIGNED_IN", SimpleNamespace(user={"id": "u2", "email": "a@example.com", "user_metadata": {}}))
    assert state.user.id == "u2"
    assert state.role == "tenant"

    fake_client.auth.emit("SIGNED_OUT", None)
    assert state.user is None
    assert state.role is None

    unsubscribe()
    assert fake_client.auth.listeners == []


def test_live_login_leaves_state_to_subscription(live_settings, fake_client):
    state = _session(live_settings, fake_client)
    state.start()
    result = state.login("agent@example.com", "pw")
    assert result.user.role == "agent"
    assert state.user is None
    assert not MockUserStore(live_settings.mock_user_file).path.exists()


def test_live_logout_error_keeps_state(live_settings, fake_client):
    fake_client.auth.current_user = {"id": "u1", "email": "t@example.com", "user_metadata": {}}
    state = _session(live_settings, fake_client)
    state.start()
    fake_client.auth.error = RuntimeError("network down")
    result = state.logout()
    assert result.error == "network down"
    assert state.user.id == "u1"


def test_sessions_share_one_backend_subscription(live_settings, fake_client):
    auth = AuthService(live_settings, fake_client)
    sessions = [SessionState(auth, MockUserStore(live_settings.mock_user_file)) for _ in range(3)]
    unsubscribes = [state.start() for state in sessions]
    assert len(fake_client.auth.listeners) == 1
    assert auth.listener_count == 3

    fake_client.auth.emit("SIGNED_IN", SimpleNamespace(user={"id": "u2", "email": "a@example.com", "user_metadata": {}}))
    assert [state.user.id for state in sessions] == ["u2", "u2", "u2"]

    unsubscribes[0]()
    assert auth.listener_count == 2
    assert len(fake_client.auth.listeners) == 1


def test_discarded_sessions_stop_listening(live_settings, fake_client):
    auth = AuthService(live_settings, fake_client)
    for _ in range(5):
        SessionState(auth, MockUserStore(live_settings.mock_user_file)).start()
    gc.collect()
    assert auth.listener_count == 0
    fake_client.auth.emit("SIGNED_OUT", None)
    assert fake_client.auth.listeners == []


def test_profile_is_read_once_per_user(live_settings):
    client = FakeSupabaseClient({"profiles": [{"id": "u1", "email": "t@example.com", "role": "agent", "company": "Paws Lettings"}]})
    client.auth.current_user = {"id": "u1", "email": "t@example.com", "user_metadata": {"role": "agent"}}
    state = _session(live_settings, client)
    state.start()
    assert state.profile.company == "Paws Lettings"
    assert state.profile.role == "agent"
    profile_queries = [query for query in client.queries if query.name == "profiles"]
    assert len(profile_queries) == 1

    client.auth.emit("SIGNED_OUT", None)
    assert state.profile is None


def test_profile_is_none_in_mock_mode(mock_settings):
    state = _session(mock_settings)
    state.start()
    state.login("agent@example.com", "pw")
    assert state.profile is None
