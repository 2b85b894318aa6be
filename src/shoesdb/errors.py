"""
Errors raised by shoesdb.

Every failure is logged once where it is detected and then raised to the
immediate caller. Nothing here is retried.
"""


class ShoesDBError(Exception):
    """Base class for all shoesdb failures."""


class EmptyInputError(ShoesDBError, ValueError):
    """An insert operation was called with zero values."""


class InvalidIdentifierTypeError(ShoesDBError, TypeError):
    """A lookup key was neither a shoe id (int) nor a shoe name (str)."""


class StoreExecutionError(ShoesDBError):
    """The store rejected or failed to execute a statement."""


class DecodeError(ShoesDBError):
    """A result row did not have the expected shape."""


class ConnectionConstructionError(ShoesDBError):
    """A handle to the store could not be built."""
