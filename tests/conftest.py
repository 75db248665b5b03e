from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from pawsplace.config import Settings
from pawsplace.db.mock_repo import MockListingRepository


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeTable:
    def __init__(self, client: "FakeSupabaseClient", name: str) -> None:
        self.client = client
        self.name = name
        self._rows: List[Dict[str, Any]] = [dict(row) for row in client.tables.get(name, [])]
        self.calls: List[tuple] = []
        client.queries.append(self)

    def select(self, columns: str = "*") -> "FakeTable":
        self.calls.append(("select", columns))
        return self

    def ilike(self, column: str, pattern: str) -> "FakeTable":
        self.calls.append(("ilike", column, pattern))
        needle = pattern.strip("%").lower()
        self._rows = [row for row in self._rows if needle in str(row.get(column) or "").lower()]
        return self

    def eq(self, column: str, value: Any) -> "FakeTable":
        self.calls.append(("eq", column, value))
        self._rows = [row for row in self._rows if row.get(column) == value]
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.calls.append(("order", column, desc))
        self._rows = sorted(self._rows, key=lambda row: str(row.get(column) or ""), reverse=desc)
        return self

    def limit(self, count: int) -> "FakeTable":
        self.calls.append(("limit", count))
        self._rows = self._rows[:count]
        return self

    def upsert(self, row: Dict[str, Any]) -> "FakeTable":
        self.calls.append(("upsert", row))
        self.client.upserts.append((self.name, row))
        return self

    def execute(self) -> FakeResponse:
        if self.client.fail_tables:
            raise RuntimeError("connection refused")
        return FakeResponse(self._rows)


class FakeAuth:
    def __init__(self) -> None:
        self.current_user: Optional[dict] = None
        self.listeners: List[Any] = []
        self.error: Optional[Exception] = None
        self.sign_up_calls: List[dict] = []
        self.sign_in_calls: List[dict] = []
        self.sign_out_calls = 0

    def _raise(self) -> None:
        if self.error is not None:
            raise self.error

    def sign_up(self, credentials: dict):
        self.sign_up_calls.append(credentials)
        self._raise()
        user = {
            "id": "user-123",
            "email": credentials["email"],
            "user_metadata": credentials.get("options", {}).get("data", {}),
        }
        return SimpleNamespace(user=SimpleNamespace(**user), session=None)

    def sign_in_with_password(self, credentials: dict):
        self.sign_in_calls.append(credentials)
        self._raise()
        user = {"id": "user-123", "email": credentials["email"], "user_metadata": {"role": "agent"}}
        return SimpleNamespace(user=SimpleNamespace(**user), session=SimpleNamespace(user=user))

    def sign_out(self) -> None:
        self.sign_out_calls += 1
        self._raise()

    def get_user(self):
        self._raise()
        if self.current_user is None:
            return None
        return SimpleNamespace(user=self.current_user)

    def on_auth_state_change(self, callback):
        self.listeners.append(callback)
        return SimpleNamespace(unsubscribe=lambda: self.listeners.remove(callback))

    def emit(self, event: str, session) -> None:
        for callback in list(self.listeners):
            callback(event, session)


class FakeSupabaseClient:
    def __init__(self, tables: Optional[Dict[str, List[dict]]] = None) -> None:
        self.tables = tables or {}
        self.auth = FakeAuth()
        self.fail_tables = False
        self.queries: List[FakeTable] = []
        self.upserts: List[tuple] = []

    def table(self, name: str) -> FakeTable:
        return FakeTable(self, name)


LIVE_ROWS = [
    {"id": 10, "Title": "Older flat", "Rent": 1500, "Listed": "2024-02-01T09:00:00Z", "Bedrooms": 1, "Location": "Brixton, SW2"},
    {"id": 11, "Title": "Newer flat", "Rent": "1800", "Listed": "2024-03-01T09:00:00Z", "Bedrooms": "2", "Location": "Camden, NW1"},
    {"id": 12, "Title": "No date", "Rent": None, "Location": "camden town"},
]


@pytest.fixture
def mock_settings(tmp_path) -> Settings:
    return Settings(mock_user_file=str(tmp_path / "mock_user.json"))


@pytest.fixture
def live_settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_key="anon-key",
        mock_user_file=str(tmp_path / "mock_user.json"),
    )


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient({"listings": LIVE_ROWS})


@pytest.fixture
def fixtures():
    return MockListingRepository().list_listings()
