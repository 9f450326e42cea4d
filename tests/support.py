# Shared helpers for people API tests.
# The in-memory connection understands exactly the statements the repository
# issues, so handler and endpoint tests run without a PostgreSQL server.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from core import db
from main import app
from people.schemas import MUTABLE_COLUMNS

ADA = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "age": 36,
    "profession": "Mathematician",
    "salary": 1000,
}

GRACE = {
    "first_name": "Grace",
    "last_name": "Hopper",
    "age": 85,
    "profession": "Rear Admiral",
    "salary": 2000,
}


class InMemoryPeopleConnection:
    """Stand-in for an asyncpg connection holding the people table in a dict."""

    def __init__(self, *, error: Exception | None = None) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.statements: list[str] = []
        self.error = error
        self._next_id = 1

    def _begin(self, sql: str) -> str:
        if self.error is not None:
            raise self.error
        verb = sql.split()[0].upper()
        self.statements.append(verb)
        return verb

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._begin(sql)
        return [dict(self.rows[key]) for key in sorted(self.rows)]

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        verb = self._begin(sql)
        if verb == "SELECT":
            row = self.rows.get(args[0])
            return dict(row) if row is not None else None
        if verb == "INSERT":
            person_id = self._next_id
            self._next_id += 1
            self.rows[person_id] = {"id": person_id, **dict(zip(MUTABLE_COLUMNS, args))}
            return dict(self.rows[person_id])
        if verb == "UPDATE":
            person_id, values = args[0], args[1:]
            if person_id not in self.rows:
                return None
            self.rows[person_id].update(zip(MUTABLE_COLUMNS, values))
            return dict(self.rows[person_id])
        raise AssertionError(f"Unexpected statement: {sql}")

    async def execute(self, sql: str, *args: Any) -> str:
        verb = self._begin(sql)
        if verb != "DELETE":
            raise AssertionError(f"Unexpected statement: {sql}")
        removed = self.rows.pop(args[0], None)
        return f"DELETE {0 if removed is None else 1}"

    def mutations(self) -> list[str]:
        return [verb for verb in self.statements if verb in {"INSERT", "UPDATE", "DELETE"}]


@contextmanager
def people_test_client(conn: InMemoryPeopleConnection) -> Iterator[TestClient]:
    """Yield a TestClient whose requests borrow `conn` instead of a pooled connection."""

    async def _connection_override():
        yield conn

    app.dependency_overrides[db.get_connection] = _connection_override
    try:
        # Not entered as a context manager: the lifespan (real pool) is skipped.
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
