"""Exceptions raised by managers and repositories.

Only ObjectManagerError is recognized by the lifecycle operations of
AbstractObjectManager; everything else propagates to the caller.
"""


class ObjectManagerError(Exception):
    """A lifecycle step could not be completed.

    Raise this from a process_* override to have save/delete/duplicate/
    activate/deactivate return False and fire the matching error hook with
    str(exc) as the message.
    """


class OptimisticLockError(Exception):
    """The version of a loaded object does not match the expected version."""

    def __init__(self, message: str, entity=None):
        super().__init__(message)
        self.entity = entity


class ManagerNotConfiguredError(RuntimeError):
    """A manager was used before a session was wired into it."""


__all__ = [
    "ObjectManagerError",
    "OptimisticLockError",
    "ManagerNotConfiguredError",
]
