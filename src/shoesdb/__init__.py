"""
shoesdb

Data access for shoes and their true-to-size ratings.
"""

from shoesdb.db import ConnectionParams, PostgresStore, connect
from shoesdb.errors import (
    ConnectionConstructionError,
    DecodeError,
    EmptyInputError,
    InvalidIdentifierTypeError,
    ShoesDBError,
    StoreExecutionError,
)
from shoesdb.keys import ById, ByName, ShoeKey, as_shoe_key
from shoesdb.shoe import ShoeRepository
from shoesdb.truetosize import TrueToSizeRepository

__all__ = [
    "ById",
    "ByName",
    "ConnectionConstructionError",
    "ConnectionParams",
    "DecodeError",
    "EmptyInputError",
    "InvalidIdentifierTypeError",
    "PostgresStore",
    "ShoeKey",
    "ShoeRepository",
    "ShoesDBError",
    "StoreExecutionError",
    "TrueToSizeRepository",
    "as_shoe_key",
    "connect",
]
