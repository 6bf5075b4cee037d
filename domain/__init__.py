"""
Domain Models Package

Declarative base, column mixins and enums shared by managers and
repositories.

Key Components:
- Base: DeclarativeBase for mapped models
- ActivatableMixin: id + active columns
- ManagedObject: protocol of the minimal managed-object capability
- LockMode, SortDirection: enums for find() and order_by
"""

from domain.enums import LockMode, SortDirection
from domain.models import ActivatableMixin, Base, ManagedObject

__all__ = [
    "Base",
    "ActivatableMixin",
    "ManagedObject",
    "LockMode",
    "SortDirection",
]
