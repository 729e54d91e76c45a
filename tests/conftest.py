"""Pytest configuration and shared fixtures."""
import os
import sys
from typing import Any, Dict, List

import pytest
from asyncpg.exceptions import DataError
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from todolist.app import create_app  # noqa: E402
from todolist.database import MAX_ID, MIN_ID  # noqa: E402


def encode_args(args: tuple) -> tuple:
    """Reject integers a bigint parameter cannot hold, as asyncpg's encoder does."""
    for value in args:
        if isinstance(value, int) and not isinstance(value, bool) and not MIN_ID <= value <= MAX_ID:
            raise DataError(f"invalid input for query argument: {value} (value out of int64 range)")
    return args


class InMemoryPool:
    """
    Pool double that understands the statements TodoRepository issues.

    Rows keep insertion order and ids are assigned from a counter, as a
    BIGSERIAL column would.
    """

    def __init__(self):
        self.rows: List[Dict[str, Any]] = []
        self.queries: List[tuple] = []
        self._next_id = 1

    async def fetch(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        self.queries.append((query, args))
        if query.startswith("SELECT"):
            return [dict(row) for row in self.rows]
        raise AssertionError(f"Unexpected fetch: {query}")

    async def execute(self, query: str, *args: Any) -> str:
        self.queries.append((query, encode_args(args)))
        if query.startswith("INSERT"):
            (text,) = args
            self.rows.append({"id": self._next_id, "text": text, "completed": False})
            self._next_id += 1
            return "INSERT 0 1"
        if query.startswith("UPDATE"):
            completed, todo_id = args
            matched = [row for row in self.rows if row["id"] == todo_id]
            for row in matched:
                row["completed"] = completed
            return f"UPDATE {len(matched)}"
        if query.startswith("DELETE"):
            (todo_id,) = args
            before = len(self.rows)
            self.rows = [row for row in self.rows if row["id"] != todo_id]
            return f"DELETE {before - len(self.rows)}"
        raise AssertionError(f"Unexpected execute: {query}")


class FailingPool:
    """Pool double whose every query raises the given error."""

    def __init__(self, error: Exception):
        self.error = error

    async def fetch(self, query: str, *args: Any):
        raise self.error

    async def execute(self, query: str, *args: Any):
        raise self.error


@pytest.fixture
def pool():
    """Fresh in-memory pool."""
    return InMemoryPool()


@pytest.fixture
def client(pool):
    """Test client for an app bound to the in-memory pool."""
    return TestClient(create_app(pool=pool))
