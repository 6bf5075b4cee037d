"""
Manager Layer

Object managers sit between application code and the ORM: reads go to a
repository, writes go to the Session, and every lifecycle operation reports
its outcome through overridable hooks.

Main Components:
- AbstractObjectManager: base class for entity managers
- LoggingHooksMixin: hook overrides that log each outcome
"""

from managers.mixins import LoggingHooksMixin
from managers.object_manager import AbstractObjectManager, Options

__all__ = [
    'AbstractObjectManager',
    'LoggingHooksMixin',
    'Options',
]
