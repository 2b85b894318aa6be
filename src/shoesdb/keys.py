"""
Shoe keys: the two ways a lookup can address a shoe.
"""

from dataclasses import dataclass

from shoesdb.errors import InvalidIdentifierTypeError


@dataclass(frozen=True)
class ById:
    shoe_id: int

    def __post_init__(self):
        if isinstance(self.shoe_id, bool) or not isinstance(self.shoe_id, int):
            raise InvalidIdentifierTypeError(
                f"ById shoe_id must be an int, got {type(self.shoe_id).__name__}"
            )


@dataclass(frozen=True)
class ByName:
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise InvalidIdentifierTypeError(
                f"ByName name must be a str, got {type(self.name).__name__}"
            )


ShoeKey = ById | ByName


def as_shoe_key(identifier) -> ShoeKey:
    """
    Lift a raw identifier into a ShoeKey.

    Accepts an existing ById/ByName, an int (shoe id) or a str (shoe name).
    bool is rejected even though it subclasses int.

    Raises:
        InvalidIdentifierTypeError: for any other type
    """
    if isinstance(identifier, (ById, ByName)):
        return identifier
    if isinstance(identifier, bool):
        raise InvalidIdentifierTypeError(
            f"Shoe identifier must be an int or a str, got {type(identifier).__name__}"
        )
    if isinstance(identifier, int):
        return ById(identifier)
    if isinstance(identifier, str):
        return ByName(identifier)
    raise InvalidIdentifierTypeError(
        f"Shoe identifier must be an int or a str, got {type(identifier).__name__}"
    )
