"""
Capability interfaces between the repositories and the store.

Repositories only ever talk to these protocols, so a psycopg-backed
PostgresStore and an in-memory test double are interchangeable:

    Executor  - runs write statements, returns affected row counts
    Querier   - runs read statements, returns a Cursor
    Cursor    - forward-only, releasable walk over result rows

Statements use psycopg's %s positional placeholders.
"""

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Cursor(Protocol):
    """Forward-only iterator over the rows of one query."""

    def advance(self) -> bool:
        """Move to the next row. Returns False when rows are exhausted or iteration failed."""
        ...

    def current(self) -> tuple | None:
        """The row the cursor is positioned on, or None before the first advance()."""
        ...

    def error(self) -> Exception | None:
        """The failure that stopped iteration early, if any."""
        ...

    def close(self) -> None:
        """Release the cursor. Safe to call more than once."""
        ...


@runtime_checkable
class Executor(Protocol):
    def execute(self, statement: str, params: Sequence[Any] = ()) -> int:
        """Execute a write statement and return the affected row count."""
        ...


@runtime_checkable
class Querier(Protocol):
    def query(self, statement: str, params: Sequence[Any] = ()) -> Cursor:
        """Execute a read statement and return a cursor over its rows."""
        ...


@runtime_checkable
class Store(Executor, Querier, Protocol):
    """A handle supporting both writes and reads."""
