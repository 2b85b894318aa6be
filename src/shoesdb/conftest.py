# src/shoesdb/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides in-memory store doubles for unit tests and database
fixtures for integration tests. Integration tests are skipped unless
SHOESDB_TEST_DATABASE_URL points at a PostgreSQL database they may wipe.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["SHOESDB_ENV"] = "test"

from pathlib import Path

import psycopg
import pytest

from shoesdb.db import PostgresStore
from shoesdb.errors import StoreExecutionError

TEST_DATABASE_URL = os.environ.get("SHOESDB_TEST_DATABASE_URL")

# =============================================================================
# Store Doubles
# =============================================================================


class FakeCursor:
    """
    Cursor over a fixed list of rows.

    error is reported by error() once the rows run out, the way a driver
    reports a failure that cut iteration short.
    """

    def __init__(self, rows, error=None):
        self.rows = list(rows)
        self.position = -1
        self._error = error
        self.close_count = 0

    def advance(self) -> bool:
        if self.position + 1 >= len(self.rows):
            return False
        self.position += 1
        return True

    def current(self):
        return self.rows[self.position]

    def error(self):
        if self.position + 1 >= len(self.rows):
            return self._error
        return None

    def close(self) -> None:
        self.close_count += 1


class FakeStore:
    """
    In-memory Executor and Querier that records every statement.

    execute() reports one affected row per VALUES group unless rowcount is
    set; query() hands out a fresh FakeCursor over rows each call.
    """

    def __init__(self, rows=(), rowcount=None, error=None, cursor_error=None):
        self.rows = list(rows)
        self.rowcount = rowcount
        self.error = error
        self.cursor_error = cursor_error
        self.executed = []
        self.queries = []
        self.cursors = []
        self.closed = False

    def execute(self, statement, params=()):
        self.executed.append((statement, list(params)))
        if self.error is not None:
            raise self.error
        if self.rowcount is not None:
            return self.rowcount
        return statement.count("(%s")

    def query(self, statement, params=()):
        self.queries.append((statement, list(params)))
        if self.error is not None:
            raise self.error
        cursor = FakeCursor(self.rows, error=self.cursor_error)
        self.cursors.append(cursor)
        return cursor

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


@pytest.fixture
def fake_store():
    """Provide an empty FakeStore."""
    return FakeStore()


@pytest.fixture
def failing_store():
    """Provide a FakeStore whose every statement fails."""
    return FakeStore(error=StoreExecutionError("connection reset by peer"))


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_db():
    """
    Apply the schema to the test database once per test session.

    Skips the requesting test when no test database is configured.
    """
    if not TEST_DATABASE_URL:
        pytest.skip("SHOESDB_TEST_DATABASE_URL is not set")

    migrations_dir = Path(__file__).parent.parent.parent / "migrations"
    schema_file = migrations_dir / "001_initial_schema.sql"

    if not schema_file.exists():
        raise FileNotFoundError(f"Migration file not found: {schema_file}")

    with psycopg.connect(TEST_DATABASE_URL) as conn:
        with conn.cursor() as cur:
            cur.execute(schema_file.read_text())
        conn.commit()

    yield TEST_DATABASE_URL


@pytest.fixture
def db_connection(test_db):
    """
    Provide an autocommit connection to an emptied test database.

    The store commits every statement, so tables are truncated before
    each test instead of rolling back afterwards.
    """
    conn = psycopg.connect(test_db, autocommit=True)

    with conn.cursor() as cur:
        cur.execute("TRUNCATE shoes, truetosize RESTART IDENTITY CASCADE")

    yield conn

    conn.close()


@pytest.fixture
def store(db_connection):
    """Provide a PostgresStore over the test connection."""
    return PostgresStore(db_connection)


# =============================================================================
# Seed Data Fixtures
# =============================================================================


def new_shoes(n: int) -> list[str]:
    """Create a set of n shoe names."""
    return [f"shoe_{i}" for i in range(n)]


def new_true_to_sizes(n: int) -> list[int]:
    """Create a set of n ratings cycling through 1-5."""
    return [(i % 5) + 1 for i in range(n)]


@pytest.fixture
def sample_shoe(db_connection) -> dict:
    """Create a single shoe with ratings [1, 3, 4, 1]."""
    with db_connection.cursor() as cur:
        cur.execute("INSERT INTO shoes (name) VALUES (%s) RETURNING id", ("shoe_1",))
        (shoe_id,) = cur.fetchone()
        for rating in [1, 3, 4, 1]:
            cur.execute(
                "INSERT INTO truetosize (truetosize, shoes_id) VALUES (%s, %s)",
                (rating, shoe_id),
            )

    return {"id": shoe_id, "name": "shoe_1", "ratings": [1, 3, 4, 1]}
