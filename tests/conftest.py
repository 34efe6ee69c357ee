import os
import sys


def pytest_sessionstart(session):
    # Ensure project root is on sys.path so `transactions` and `budgets` resolve
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


# --- Test utilities: Fake in-memory SurrealDB ---
import uuid
import pytest
import pytest_asyncio


class FakeAsyncSurreal:
    """Implements the subset of AsyncSurreal the repositories use."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, dict]] = {}
        self.calls: list[tuple] = []

    async def create(self, table: str, payload: dict):
        self.calls.append(("create", table))
        new_id = uuid.uuid4().hex[:20]
        # Simulate SurrealDB id like "transaction:<id>"
        record = {**payload, "id": f"{table}:{new_id}"}
        self._tables.setdefault(table, {})[new_id] = record
        return {**record}

    async def query(self, query: str, vars: dict | None = None):
        self.calls.append(("query", query))
        q = query.strip()
        if q.upper().startswith("SELECT * FROM "):
            table = q.split()[3].rstrip(";")
            rows = list(self._tables.get(table, {}).values())
            rows.sort(key=lambda r: r.get("created_at") or "")
            return [{**r} for r in rows]

        if q.upper().startswith("DELETE TYPE::THING($TABLE, $ID)"):
            vars = vars or {}
            self._tables.get(vars["table"], {}).pop(vars["id"], None)
            return []

        # Default empty result for unrecognized queries used in tests
        return []

    async def close(self):
        return None


class BrokenAsyncSurreal(FakeAsyncSurreal):
    async def create(self, table: str, payload: dict):
        raise ConnectionError("store unavailable")

    async def query(self, query: str, vars: dict | None = None):
        raise ConnectionError("store unavailable")


@pytest_asyncio.fixture
async def fake_db():
    # Provide a fresh fake DB per test function
    db = FakeAsyncSurreal()
    yield db


@pytest.fixture
def memory_db():
    return FakeAsyncSurreal()


@pytest.fixture
def broken_db():
    return BrokenAsyncSurreal()
