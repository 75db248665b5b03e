import pytest

from pawsplace.config import PLACEHOLDER_KEY, PLACEHOLDER_URL, Settings, is_configured
from pawsplace.services.container import get_services, reset_services


@pytest.mark.parametrize(
    "url, key",
    [
        (None, None),
        ("https://abc.supabase.co", None),
        (None, "anon-key"),
        ("", "anon-key"),
        (PLACEHOLDER_URL, "anon-key"),
        ("https://abc.supabase.co", PLACEHOLDER_KEY),
        (PLACEHOLDER_URL, PLACEHOLDER_KEY),
    ],
)
def test_not_configured(url, key):
    assert is_configured(Settings(supabase_url=url, supabase_key=key)) is False


def test_configured_with_real_values():
    settings = Settings(supabase_url="https://abc.supabase.co", supabase_key="anon-key")
    assert is_configured(settings) is True
    assert settings.mode == "supabase"


def test_from_env_reads_public_fallback_names(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("NEXT_PUBLIC_SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("SEARCH_DEBOUNCE_MS", "500")
    settings = Settings.from_env()
    assert settings.supabase_url == "https://abc.supabase.co"
    assert settings.search_debounce_ms == 500
    assert settings.mode == "supabase"


def test_from_env_without_credentials_is_mock(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"):
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env().mode == "mock"


def test_services_are_shared_until_reset(monkeypatch, tmp_path):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_ANON_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PAWSPLACE_MOCK_USER_FILE", str(tmp_path / "user.json"))
    reset_services()
    try:
        services = get_services()
        assert services is get_services()
        assert services.client is None
        assert services.settings.mode == "mock"
        session = services.new_session()
        assert session.store.path == tmp_path / "user.json"
        reset_services()
        assert get_services() is not services
    finally:
        reset_services()
