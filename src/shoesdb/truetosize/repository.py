import logging
from contextlib import closing
from typing import List, Optional, Sequence

from shoesdb.errors import (
    DecodeError,
    EmptyInputError,
    InvalidIdentifierTypeError,
    ShoesDBError,
    StoreExecutionError,
)
from shoesdb.interfaces import Store
from shoesdb.keys import ById, ShoeKey, as_shoe_key
from shoesdb.statements import values_placeholders

logger = logging.getLogger(__name__)

SELECT_BY_SHOE_ID = """
    SELECT t.truetosize
    FROM truetosize t
    WHERE t.shoes_id = %s
"""

SELECT_BY_SHOE_NAME = """
    SELECT t.truetosize
    FROM truetosize t
    INNER JOIN shoes s ON (t.shoes_id = s.id)
    WHERE s.name = %s
"""


def decode_rating(row) -> int:
    """Decode a single-column result row into an integer rating."""
    if not isinstance(row, (tuple, list)) or len(row) != 1:
        raise DecodeError(f"Expected a row with one column, got {row!r}")
    value = row[0]
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Expected an integer rating, got {value!r}")
    return value


class TrueToSizeRepository:
    """
    Repository for true-to-size rating data access.
    Encapsulates all SQL for the truetosize table.
    """

    def __init__(self, store: Store, logger: logging.Logger = logger):
        self.store = store
        self.logger = logger

    def insert(self, ratings: Sequence[int], shoe_id: Optional[int] = None) -> int:
        """
        Insert true-to-size ratings in a single statement.

        Args:
            ratings: Rating values, at least one
            shoe_id: Shoe every rating belongs to; left NULL when omitted

        Returns:
            Number of rows the store reports as inserted

        Raises:
            EmptyInputError: if no ratings are given; nothing is executed
            StoreExecutionError: if the store fails the statement
        """
        ratings = list(ratings)
        if not ratings:
            err = EmptyInputError("Zero truetosizes passed to insert")
            self.logger.error("%s", err)
            raise err

        if shoe_id is None:
            query = (
                "INSERT INTO truetosize (truetosize) "
                f"VALUES {values_placeholders(len(ratings))}"
            )
            params = ratings
        else:
            query = (
                "INSERT INTO truetosize (truetosize, shoes_id) "
                f"VALUES {values_placeholders(len(ratings), width=2)}"
            )
            params = [v for rating in ratings for v in (rating, shoe_id)]

        try:
            return self.store.execute(query, params)
        except StoreExecutionError as e:
            self.logger.error("Inserting %d truetosizes failed: %s", len(ratings), e)
            raise

    def find(self, identifier: ShoeKey | int | str) -> List[int]:
        """
        Get every true-to-size rating for one shoe, in the order the store returns them.

        Args:
            identifier: ById/ByName, or a raw shoe id (int) or shoe name (str)

        Raises:
            InvalidIdentifierTypeError: for any other identifier type; nothing is queried
            StoreExecutionError: if the query or row fetching fails
            DecodeError: if a row is not a single integer
        """
        try:
            key = as_shoe_key(identifier)
        except InvalidIdentifierTypeError as e:
            self.logger.error("%s", e)
            raise

        if isinstance(key, ById):
            query, param = SELECT_BY_SHOE_ID, key.shoe_id
        else:
            query, param = SELECT_BY_SHOE_NAME, key.name

        try:
            cursor = self.store.query(query, (param,))
        except StoreExecutionError as e:
            self.logger.error("Selecting truetosizes for %r failed: %s", key, e)
            raise

        with closing(cursor):
            ratings = []
            while cursor.advance():
                try:
                    ratings.append(decode_rating(cursor.current()))
                except DecodeError as e:
                    self.logger.error("Decoding truetosize for %r failed: %s", key, e)
                    raise

            err = cursor.error()
            if err is not None:
                self.logger.error("Reading truetosizes for %r failed: %s", key, err)
                if isinstance(err, ShoesDBError):
                    raise err
                raise StoreExecutionError(str(err)) from err

        return ratings
