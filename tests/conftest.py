import os
from types import SimpleNamespace
from uuid import uuid4

import pytest

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-service-key")

from invoice_actions.services.cache import ListingCache  # noqa: E402


class FakeQuery:
    """Records one query-builder chain and applies it to the fake table."""

    def __init__(self, client: "FakeSupabase", table: str) -> None:
        self.client = client
        self.table = table
        self.operation: str | None = None
        self.payload: dict | None = None
        self.columns: str | None = None
        self.filters: list[tuple[str, object]] = []
        self.order_by: tuple[str, bool] | None = None

    def insert(self, payload: dict) -> "FakeQuery":
        self.operation = "insert"
        self.payload = dict(payload)
        return self

    def update(self, payload: dict) -> "FakeQuery":
        self.operation = "update"
        self.payload = dict(payload)
        return self

    def delete(self) -> "FakeQuery":
        self.operation = "delete"
        return self

    def select(self, columns: str = "*") -> "FakeQuery":
        self.operation = "select"
        self.columns = columns
        return self

    def eq(self, column: str, value: object) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def execute(self) -> SimpleNamespace:
        self.client.executed.append(self)
        if self.client.error is not None:
            raise self.client.error
        return SimpleNamespace(data=self.client.apply(self))


class FakeSupabase:
    """In-memory stand-in for the Supabase client's table API."""

    def __init__(self) -> None:
        self.rows: dict[str, dict] = {}
        self.executed: list[FakeQuery] = []
        self.error: Exception | None = None

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, **values) -> dict:
        row = {"id": str(uuid4()), **values}
        self.rows[row["id"]] = row
        return dict(row)

    def statements(self, operation: str) -> list[FakeQuery]:
        return [query for query in self.executed if query.operation == operation]

    def _matching(self, query: FakeQuery) -> list[dict]:
        return [
            row
            for row in self.rows.values()
            if all(row.get(column) == value for column, value in query.filters)
        ]

    def apply(self, query: FakeQuery) -> list[dict]:
        if query.operation == "insert":
            return [self.seed(**query.payload)]
        if query.operation == "update":
            matched = self._matching(query)
            for row in matched:
                row.update(query.payload)
            return [dict(row) for row in matched]
        if query.operation == "delete":
            matched = self._matching(query)
            for row in matched:
                del self.rows[row["id"]]
            return matched
        rows = [dict(row) for row in self._matching(query)]
        if query.order_by:
            column, desc = query.order_by
            rows.sort(key=lambda row: row[column], reverse=desc)
        return rows


class RecordingRevalidator:
    def __init__(self) -> None:
        self.paths: list[str] = []

    def revalidate_path(self, path: str) -> None:
        self.paths.append(path)


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def revalidator() -> RecordingRevalidator:
    return RecordingRevalidator()


@pytest.fixture
def listing_cache() -> ListingCache:
    return ListingCache()
