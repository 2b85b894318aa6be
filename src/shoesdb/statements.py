"""Helpers for building parameterized statements."""


def values_placeholders(rows: int, width: int = 1) -> str:
    """
    Placeholder groups for a multi-row VALUES clause.

    values_placeholders(3) -> "(%s), (%s), (%s)"
    values_placeholders(2, width=2) -> "(%s, %s), (%s, %s)"
    """
    group = "(" + ", ".join(["%s"] * width) + ")"
    return ", ".join([group] * rows)
