"""
Database connection and store adapters.

Wraps a psycopg connection in PostgresStore, which satisfies both the
Executor and Querier interfaces the repositories depend on. Rows come
back as plain tuples.

For testing, repositories accept any object implementing those
interfaces, so an in-memory double can replace PostgresStore entirely.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import psycopg
from psycopg.conninfo import make_conninfo

from shoesdb.config import Config, config
from shoesdb.errors import ConnectionConstructionError, StoreExecutionError

logger = logging.getLogger(__name__)


# =============================================================================
# Cursor Adapter
# =============================================================================


class PostgresCursor:
    """
    Cursor over the rows of a single psycopg query.

    Fetches one row per advance(). A driver error during fetching stops
    iteration and is kept for error() rather than raised, so the caller
    decides how to surface it.
    """

    def __init__(self, cursor: psycopg.Cursor):
        self._cursor = cursor
        self._row: tuple | None = None
        self._error: Exception | None = None
        self._closed = False

    def advance(self) -> bool:
        if self._closed or self._error is not None:
            return False
        try:
            self._row = self._cursor.fetchone()
        except psycopg.Error as e:
            self._error = e
            self._row = None
            return False
        return self._row is not None

    def current(self) -> tuple | None:
        return self._row

    def error(self) -> Exception | None:
        return self._error

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cursor.close()


# =============================================================================
# Store
# =============================================================================


class PostgresStore:
    """
    Executor and Querier backed by a psycopg connection.

    The connection runs in autocommit mode: every statement is its own
    transaction, so a multi-row INSERT either lands completely or not at all.

    Usage:
        with connect() as store:
            ShoeRepository(store).insert(["shoe_0", "shoe_1"])
    """

    def __init__(self, conn: psycopg.Connection):
        self.conn = conn

    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """
        Execute a write statement.

        Args:
            statement: SQL with %s placeholders
            params: Positional parameter values

        Returns:
            Number of rows the server reports as affected

        Raises:
            StoreExecutionError: if psycopg rejects or fails the statement
        """
        try:
            with self.conn.cursor() as cur:
                cur.execute(statement, tuple(params))
                return cur.rowcount
        except psycopg.Error as e:
            raise StoreExecutionError(str(e)) from e

    def query(self, statement: str, params: Sequence[Any] = ()) -> PostgresCursor:
        """
        Execute a read statement and return a cursor over its rows.

        The caller owns the returned cursor and must close() it.

        Raises:
            StoreExecutionError: if psycopg rejects or fails the statement
        """
        cur = None
        try:
            cur = self.conn.cursor()
            cur.execute(statement, tuple(params))
        except psycopg.Error as e:
            if cur is not None:
                cur.close()
            raise StoreExecutionError(str(e)) from e
        return PostgresCursor(cur)

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "PostgresStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# =============================================================================
# Connection Factory
# =============================================================================


@dataclass
class ConnectionParams:
    """Parameters for reaching the shoes database."""

    user: str = "shoes"
    dbname: str = "shoes"
    sslmode: str = "verify-full"
    host: str | None = None
    port: int | None = None
    password: str | None = None

    @classmethod
    def from_config(cls, cfg: Config) -> "ConnectionParams":
        return cls(
            user=cfg.user,
            dbname=cfg.dbname,
            sslmode=cfg.sslmode,
            host=cfg.host,
            port=cfg.port,
            password=cfg.password,
        )

    def conninfo(self) -> str:
        parts = {
            "user": self.user,
            "dbname": self.dbname,
            "sslmode": self.sslmode,
            "host": self.host,
            "port": self.port,
            "password": self.password,
        }
        return make_conninfo(
            **{k: v for k, v in parts.items() if v is not None}
        )


def connect(
    params: ConnectionParams | str | None = None,
    logger: logging.Logger = logger,
) -> PostgresStore:
    """
    Open a store handle to the shoes database.

    Args:
        params: ConnectionParams, a conninfo string/URL, or None to use
            the loaded configuration
        logger: Diagnostic sink for the failure record

    Returns:
        PostgresStore over an autocommit connection

    Raises:
        ConnectionConstructionError: if the connection cannot be built
    """
    if params is None:
        conninfo = config.database_url or ConnectionParams.from_config(config).conninfo()
    elif isinstance(params, ConnectionParams):
        conninfo = params.conninfo()
    else:
        conninfo = params

    try:
        conn = psycopg.connect(conninfo, autocommit=True)
    except psycopg.Error as e:
        logger.error("Could not connect to the shoes database: %s", e)
        raise ConnectionConstructionError(str(e)) from e
    return PostgresStore(conn)
