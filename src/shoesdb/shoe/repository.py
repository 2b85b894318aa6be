import logging
from contextlib import closing
from typing import Optional, Sequence

from shoesdb.errors import DecodeError, EmptyInputError, ShoesDBError, StoreExecutionError
from shoesdb.interfaces import Store
from shoesdb.statements import values_placeholders

logger = logging.getLogger(__name__)


class ShoeRepository:
    """
    Repository for shoe data access.
    Encapsulates all SQL for the shoes table.
    """

    def __init__(self, store: Store, logger: logging.Logger = logger):
        self.store = store
        self.logger = logger

    def insert(self, names: Sequence[str]) -> int:
        """
        Insert shoes by name in a single statement.

        Args:
            names: Shoe names, at least one

        Returns:
            Number of rows the store reports as inserted

        Raises:
            EmptyInputError: if no names are given; nothing is executed
            StoreExecutionError: if the store fails the statement
        """
        names = list(names)
        if not names:
            err = EmptyInputError("Zero shoes passed to insert")
            self.logger.error("%s", err)
            raise err

        query = f"INSERT INTO shoes (name) VALUES {values_placeholders(len(names))}"

        try:
            return self.store.execute(query, names)
        except StoreExecutionError as e:
            self.logger.error("Inserting %d shoes failed: %s", len(names), e)
            raise

    def find_id(self, name: str) -> Optional[int]:
        """
        Get the id of the first shoe with the given name.

        Returns:
            The lowest matching id, or None if no shoe has that name

        Raises:
            StoreExecutionError: if the query or row fetching fails
            DecodeError: if the row is not a single integer
        """
        try:
            cursor = self.store.query(
                "SELECT id FROM shoes WHERE name = %s ORDER BY id LIMIT 1", (name,)
            )
        except StoreExecutionError as e:
            self.logger.error("Selecting shoe %r failed: %s", name, e)
            raise

        with closing(cursor):
            if cursor.advance():
                row = cursor.current()
                if (
                    not isinstance(row, (tuple, list))
                    or len(row) != 1
                    or not isinstance(row[0], int)
                ):
                    err = DecodeError(f"Expected a row with one integer id, got {row!r}")
                    self.logger.error("%s", err)
                    raise err
                return row[0]

            err = cursor.error()
            if err is not None:
                self.logger.error("Selecting shoe %r failed: %s", name, err)
                if isinstance(err, ShoesDBError):
                    raise err
                raise StoreExecutionError(str(err)) from err
        return None
