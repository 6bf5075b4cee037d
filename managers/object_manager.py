"""
Object Manager

Provides AbstractObjectManager, the base class every entity manager extends.
It forwards reads to a repository and writes to a SQLAlchemy Session, and
wraps the five lifecycle operations (save, delete, duplicate, activate,
deactivate) in a uniform success/error hook protocol.

Each lifecycle operation has the same shape:
1. call the matching process_* step (override point for the work itself)
2. on success, call the matching on_*_success hook
3. on ObjectManagerError from either of the above, call the matching
   on_*_error hook with the message and return False

Any other exception propagates unchanged. Hooks are no-ops here; subclasses
override them to send notifications, log, or dispatch events.

Example Usage:
```python
from managers import AbstractObjectManager

class ArticleManager(AbstractObjectManager[Article]):
    entity_class = Article

    def process_save(self, article, options):
        if not article.title:
            raise ObjectManagerError("An article needs a title")
        super().process_save(article, options)

    def on_create_success(self, article, options):
        notify_editors(article)

with db.session_scope() as session:
    manager = ArticleManager(session)
    if not manager.save(article):
        ...
```
"""

import copy
import logging
from typing import Any, Generic, Optional, TypeVar, Union

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from domain.enums import LockMode
from exceptions import ManagerNotConfiguredError, ObjectManagerError
from logging_config import setup_logging
from repositories.base import BaseRepository, Criteria, OrderBy

logger = setup_logging(__name__)

T = TypeVar("T")

Options = dict[str, Any]


class AbstractObjectManager(Generic[T]):
    """
    Lifecycle facade over a repository and a Session.

    ## Wiring:
    - session: injected through the constructor or set_session()
    - get_repository(): builds a BaseRepository for ``entity_class``;
      override it to return a custom repository

    ## Method Categories:

    ### Read (delegated to the repository)
    - find(id, lock_mode, lock_version)
    - find_all()
    - find_by(criteria, order_by, limit, offset)
    - find_one_by(criteria, order_by)

    ### Write (delegated to the session, fluent)
    - persist(obj), remove(obj), flush()

    ### Lifecycle (process step + hook pair)
    - save(obj, options) -> bool
    - delete(obj, options) -> bool
    - duplicate(obj, options) -> clone | False
    - activate(obj, options) -> bool
    - deactivate(obj, options) -> bool

    Class Attributes:
        entity_class: Mapped class handled by this manager
        identifier_attribute: Attribute whose falsy value means "new object"
        active_attribute: Attribute toggled by activate()/deactivate()
    """

    entity_class: Optional[type] = None
    identifier_attribute: str = "id"
    active_attribute: str = "active"

    def __init__(
        self,
        session: Optional[Session] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """
        Initialize the manager.

        Args:
            session: Optional Session (can be wired later with set_session)
            logger_instance: Optional logger used by hook overrides (defaults to module logger)
        """
        self._session = session
        self._repository = None
        self._logger = logger_instance or logger

    # =========================================================================
    # Wiring
    # =========================================================================

    def set_session(self, session: Session) -> None:
        """Wire the Session used for persist/remove/flush and for reads."""
        self._session = session
        self._repository = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise ManagerNotConfiguredError(
                f"{type(self).__name__} has no session; call set_session() first"
            )
        return self._session

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def get_repository(self) -> BaseRepository[T]:
        """
        Return the repository that serves read operations.

        The default builds (and caches per session) a BaseRepository for
        ``entity_class``. Subclasses without ``entity_class`` must override.

        Raises:
            NotImplementedError: If neither entity_class nor an override exists
        """
        if self.entity_class is None:
            raise NotImplementedError(
                f"{type(self).__name__} must set `entity_class` or implement `get_repository`."
            )
        if self._repository is None:
            self._repository = BaseRepository(self.session, self.entity_class)
        return self._repository

    # =========================================================================
    # Read Operations
    # =========================================================================

    def find(
        self,
        id: Any,
        lock_mode: Union[LockMode, str, None] = LockMode.NONE,
        lock_version: Any = None,
    ) -> Optional[T]:
        return self.get_repository().find(id, lock_mode, lock_version)

    def find_all(self) -> list[T]:
        return self.get_repository().find_all()

    def find_by(
        self,
        criteria: Criteria,
        order_by: Optional[OrderBy] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[T]:
        return self.get_repository().find_by(criteria, order_by, limit, offset)

    def find_one_by(self, criteria: Criteria, order_by: Optional[OrderBy] = None) -> Optional[T]:
        return self.get_repository().find_one_by(criteria, order_by)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def persist(self, obj: T) -> "AbstractObjectManager[T]":
        self.session.add(obj)
        return self

    def remove(self, obj: T) -> "AbstractObjectManager[T]":
        self.session.delete(obj)
        return self

    def flush(self) -> "AbstractObjectManager[T]":
        self.session.flush()
        return self

    # =========================================================================
    # Lifecycle Operations
    # =========================================================================

    def is_new(self, obj: T) -> bool:
        """True if ``obj`` has no identifier yet."""
        return not getattr(obj, self.identifier_attribute, None)

    def save(self, obj: T, options: Optional[Options] = None) -> bool:
        """
        Save the object (insert if new, update otherwise).

        Whether the object is new is decided before process_save runs, so
        an identifier assigned by the flush does not turn a create into an
        update.

        Returns:
            True on success, False if process_save or the success hook
            raised ObjectManagerError
        """
        options = {} if options is None else options
        is_new = self.is_new(obj)

        try:
            self.process_save(obj, options)
            if is_new:
                self.on_create_success(obj, options)
            else:
                self.on_update_success(obj, options)
            return True
        except ObjectManagerError as exception:
            if is_new:
                self.on_create_error(obj, str(exception), options)
            else:
                self.on_update_error(obj, str(exception), options)
            return False

    def delete(self, obj: T, options: Optional[Options] = None) -> bool:
        """Delete the object. Returns False on ObjectManagerError."""
        options = {} if options is None else options
        try:
            self.process_delete(obj, options)
            self.on_delete_success(obj, options)
            return True
        except ObjectManagerError as exception:
            self.on_delete_error(obj, str(exception), options)
            return False

    def duplicate(self, obj: T, options: Optional[Options] = None) -> Union[T, bool]:
        """
        Duplicate the object.

        Returns:
            The persisted clone, or False if process_duplicate or
            on_duplicate_success raised ObjectManagerError
        """
        options = {} if options is None else options
        try:
            clone = self.process_duplicate(obj, options)
            self.on_duplicate_success(obj, clone, options)
            return clone
        except ObjectManagerError as exception:
            self.on_duplicate_error(obj, str(exception), options)
            return False

    def activate(self, obj: T, options: Optional[Options] = None) -> bool:
        """Activate the object. Returns False on ObjectManagerError."""
        options = {} if options is None else options
        try:
            self.process_activate(obj, options)
            self.on_activate_success(obj, options)
            return True
        except ObjectManagerError as exception:
            self.on_activate_error(obj, str(exception), options)
            return False

    def deactivate(self, obj: T, options: Optional[Options] = None) -> bool:
        """Deactivate the object. Returns False on ObjectManagerError."""
        options = {} if options is None else options
        try:
            self.process_deactivate(obj, options)
            self.on_deactivate_success(obj, options)
            return True
        except ObjectManagerError as exception:
            self.on_deactivate_error(obj, str(exception), options)
            return False

    # =========================================================================
    # Process Steps - override to customize the work of each operation
    # =========================================================================

    def process_save(self, obj: T, options: Options) -> None:
        self.persist(obj).flush()

    def process_delete(self, obj: T, options: Options) -> None:
        self.remove(obj).flush()

    def process_duplicate(self, obj: T, options: Options) -> T:
        clone = self.clone_object(obj)
        self.persist(clone).flush()
        return clone

    def process_activate(self, obj: T, options: Options) -> None:
        setattr(obj, self.active_attribute, True)
        self.persist(obj).flush()

    def process_deactivate(self, obj: T, options: Options) -> None:
        setattr(obj, self.active_attribute, False)
        self.persist(obj).flush()

    def clone_object(self, obj: T) -> T:
        """
        Return a shallow, not yet persisted copy of ``obj``.

        For mapped objects every column attribute is copied except primary
        key and version columns, and plain instance attributes (state set
        outside the mapping, e.g. in ``__init__``) are copied by reference;
        relationships are left unset. Other objects are copied with
        copy.copy() and their identifier is cleared.
        """
        mapper = sa_inspect(type(obj), raiseerr=False)
        if mapper is None:
            clone = copy.copy(obj)
            setattr(clone, self.identifier_attribute, None)
            return clone

        skipped = set(mapper.primary_key)
        if mapper.version_id_col is not None:
            skipped.add(mapper.version_id_col)

        # bypasses __init__, the same way the ORM builds loaded instances
        clone = mapper.class_manager.new_instance()
        for prop in mapper.column_attrs:
            if any(column in skipped for column in prop.columns):
                continue
            setattr(clone, prop.key, getattr(obj, prop.key))
        for key, value in vars(obj).items():
            if key == "_sa_instance_state" or key in mapper.attrs:
                continue
            setattr(clone, key, value)
        return clone

    # =========================================================================
    # Hooks - no-ops, override to react to outcomes
    # =========================================================================

    def on_create_success(self, obj: T, options: Options) -> None:
        """Triggered after the object is created."""

    def on_create_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be created."""

    def on_update_success(self, obj: T, options: Options) -> None:
        """Triggered after the object is updated."""

    def on_update_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be updated."""

    def on_delete_success(self, obj: T, options: Options) -> None:
        """Triggered after the object is deleted."""

    def on_delete_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be deleted."""

    def on_activate_success(self, obj: T, options: Options) -> None:
        """Triggered after the object is activated."""

    def on_activate_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be activated."""

    def on_deactivate_success(self, obj: T, options: Options) -> None:
        """Triggered after the object is deactivated."""

    def on_deactivate_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be deactivated."""

    def on_duplicate_success(self, obj: T, clone: T, options: Options) -> None:
        """Triggered after the object is duplicated; ``clone`` is the new copy."""

    def on_duplicate_error(self, obj: T, error_message: str, options: Options) -> None:
        """Triggered if the object can not be duplicated."""
