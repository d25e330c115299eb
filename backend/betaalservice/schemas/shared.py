from typing import TypeVar

T = TypeVar("T")


def reject_null(value: T | None) -> T:
    """Field validator body for update fields whose column is NOT NULL.

    Omitting such a field leaves it unchanged; sending ``null`` is an error.
    """
    if value is None:
        raise ValueError("may not be null")
    return value
