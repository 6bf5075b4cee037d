"""
Domain Models

Declarative base and column mixins for objects handled by managers.

A managed object only needs two things: an identifier attribute whose
absence means "not yet persisted", and an active flag that
activate()/deactivate() toggle. ActivatableMixin provides both as mapped
columns; ManagedObject describes the same capability for type checkers.
"""

from typing import Any, Protocol, runtime_checkable

from sqlalchemy import Boolean
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for ORM models managed by object managers."""

    pass


class ActivatableMixin:
    """
    Adds an autoincrement primary key and an ``active`` flag to a model.

    Example:
        class Article(ActivatableMixin, Base):
            __tablename__ = "articles"
            title: Mapped[str]
    """
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    active: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def is_new(self) -> bool:
        return not self.id

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r} active={self.active!r}>"


@runtime_checkable
class ManagedObject(Protocol):
    """Minimal capability set of an object handled by AbstractObjectManager."""

    id: Any
    active: bool
