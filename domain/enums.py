"""
Domain Enums

Enumerations for categorical values passed between managers and repositories.
"""

from enum import Enum, auto
from typing import Union


class LockMode(Enum):
    """
    Lock modes accepted by ``find()``.

    - NONE: plain read, no locking
    - OPTIMISTIC: compare the entity's version column against an expected version
    - PESSIMISTIC_READ: shared row lock (``SELECT ... FOR SHARE``)
    - PESSIMISTIC_WRITE: exclusive row lock (``SELECT ... FOR UPDATE``)

    Pessimistic modes are passed straight to the database; backends without
    row locking (e.g. SQLite) silently ignore them.
    """
    NONE = auto()
    OPTIMISTIC = auto()
    PESSIMISTIC_READ = auto()
    PESSIMISTIC_WRITE = auto()

    @classmethod
    def coerce(cls, value: Union["LockMode", str, None]) -> "LockMode":
        """
        Accept a LockMode, its name (case-insensitive) or None.

        Args:
            value: Lock mode in any of the accepted forms

        Returns:
            The matching LockMode (NONE for None)

        Raises:
            ValueError: If a string does not name a lock mode
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown lock mode: {value!r}") from None

    @property
    def with_for_update(self):
        """Return the ``with_for_update`` argument for ``Session.get()``."""
        return {
            LockMode.NONE: None,
            LockMode.OPTIMISTIC: None,
            LockMode.PESSIMISTIC_READ: {"read": True},
            LockMode.PESSIMISTIC_WRITE: True,
        }[self]

    @property
    def is_pessimistic(self) -> bool:
        return self in (LockMode.PESSIMISTIC_READ, LockMode.PESSIMISTIC_WRITE)


class SortDirection(Enum):
    """Sort direction for ``order_by`` mappings."""
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def coerce(cls, value: Union["SortDirection", str]) -> "SortDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown sort direction: {value!r} (expected ASC or DESC)") from None
