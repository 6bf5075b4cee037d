"""
Base Repository

Read-side access to one mapped class through a SQLAlchemy Session.

Design Principles:
1. Dependency Injection - Receives the Session, doesn't create it
2. Criteria mappings - find_by/find_one_by take {attribute: value} dicts
3. No writes - persisting and flushing belong to the object manager
"""

from typing import Any, Generic, Mapping, Optional, TypeVar
import logging

import pandas as pd
from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session

from domain.enums import LockMode, SortDirection
from exceptions import OptimisticLockError
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="repositories.log")

T = TypeVar("T")

Criteria = Mapping[str, Any]
OrderBy = Mapping[str, Any]


class BaseRepository(Generic[T]):
    """
    Repository over a single mapped class.

    Criteria values are matched with ``==``; a list, tuple, set or
    frozenset value becomes ``IN``; ``None`` becomes ``IS NULL``.
    ``order_by`` maps attribute names to ``"ASC"`` or ``"DESC"``.

    Attributes:
        session: Session used for every query
        entity_class: The mapped class this repository reads
    """

    def __init__(
        self,
        session: Session,
        entity_class: type[T],
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize repository with a session and the class it reads.

        Args:
            session: SQLAlchemy Session
            entity_class: Mapped class
            logger_instance: Optional logger (defaults to module logger)
        """
        self.session = session
        self.entity_class = entity_class
        self._mapper = inspect(entity_class)
        self._logger = logger_instance or logger

    @property
    def entity_name(self) -> str:
        return self.entity_class.__name__

    def find(
        self,
        id: Any,
        lock_mode: LockMode | str | None = LockMode.NONE,
        lock_version: Any = None,
    ) -> Optional[T]:
        """Load an object by primary key.

        Args:
            id: Primary key value (tuple for composite keys)
            lock_mode: LockMode or its name; pessimistic modes lock the row
            lock_version: Expected version when lock_mode is OPTIMISTIC

        Returns:
            The object, or None if no row has this key

        Raises:
            OptimisticLockError: If an optimistic lock is requested on an
                unversioned class, or the loaded version differs from
                lock_version
        """
        lock_mode = LockMode.coerce(lock_mode)

        if lock_mode is LockMode.OPTIMISTIC and self._mapper.version_id_col is None:
            raise OptimisticLockError(
                f"Cannot obtain optimistic lock on unversioned entity {self.entity_name}"
            )

        entity = self.session.get(
            self.entity_class, id, with_for_update=lock_mode.with_for_update
        )

        if entity is not None and lock_mode is LockMode.OPTIMISTIC and lock_version is not None:
            version_key = self._mapper.get_property_by_column(self._mapper.version_id_col).key
            current = getattr(entity, version_key)
            if current != lock_version:
                raise OptimisticLockError(
                    f"The optimistic lock failed, version {lock_version!r} was expected, "
                    f"but is actually {current!r}",
                    entity=entity,
                )
        return entity

    def find_all(self) -> list[T]:
        return self.find_by({})

    def find_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[T]:
        """Return every object matching ``criteria``."""
        stmt = self._build_select(criteria, order_by, limit, offset)
        return list(self.session.scalars(stmt).all())

    def find_one_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
    ) -> Optional[T]:
        """Return the first object matching ``criteria``, or None."""
        stmt = self._build_select(criteria, order_by, limit=1)
        return self.session.scalars(stmt).first()

    def count(self, criteria: Optional[Criteria] = None) -> int:
        stmt = select(func.count()).select_from(self.entity_class)
        stmt = stmt.where(*self._where_clauses(criteria or {}))
        return self.session.scalar(stmt)

    def find_by_df(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> pd.DataFrame:
        """Run a find_by query and return the mapped columns as a DataFrame.

        Reads through the session's connection, so pending changes are
        flushed first when the session autoflushes.
        """
        columns = [getattr(self.entity_class, attr.key) for attr in self._mapper.column_attrs]
        stmt = self._apply_ordering(
            select(*columns).where(*self._where_clauses(criteria)),
            order_by, limit, offset,
        )
        if self.session.autoflush:
            self.session.flush()
        df = pd.read_sql_query(stmt, self.session.connection())
        self._logger.debug(f"find_by_df({self.entity_name}, {dict(criteria)}) -> {len(df)} rows")
        return df

    def _attribute(self, key: str):
        if key not in self._mapper.attrs:
            raise ValueError(f"{self.entity_name} has no mapped attribute '{key}'")
        return getattr(self.entity_class, key)

    def _where_clauses(self, criteria: Criteria) -> list:
        clauses = []
        for key, value in criteria.items():
            attr = self._attribute(key)
            if value is None:
                clauses.append(attr.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                clauses.append(attr.in_(list(value)))
            else:
                clauses.append(attr == value)
        return clauses

    def _apply_ordering(self, stmt, order_by, limit=None, offset=None):
        for key, direction in (order_by or {}).items():
            attr = self._attribute(key)
            direction = SortDirection.coerce(direction)
            stmt = stmt.order_by(attr.desc() if direction is SortDirection.DESC else attr.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt

    def _build_select(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ):
        stmt = select(self.entity_class).where(*self._where_clauses(criteria))
        stmt = self._apply_ordering(stmt, order_by, limit, offset)
        self._logger.debug("%s query: %s", self.entity_name, stmt)
        return stmt


def get_repository(session: Session, entity_class: type[T]) -> BaseRepository[T]:
    """Create a BaseRepository for ``entity_class`` on ``session``."""
    return BaseRepository(session, entity_class)
