"""
Manager Registry

Centralized singleton management for object managers.
Managers are registered once under a name, and a Session is wired into
all of them in one call, so application code never constructs managers
or passes sessions around by hand.

Register managers at startup and wire a session per unit of work.
"""

import threading
from typing import TypeVar, Callable

from logging_config import setup_logging

logger = setup_logging(__name__)

T = TypeVar('T')

_registry: dict[str, object] = {}
_registry_lock = threading.RLock()


def get_manager(manager_name: str, factory: Callable[[], T]) -> T:
    """Get or create a manager instance in the registry.

    Args:
        manager_name: Unique key for the manager
        factory: Zero-argument callable that creates the manager instance

    Returns:
        The manager instance (either cached or newly created)

    Example:
        def get_article_manager() -> ArticleManager:
            from state import get_manager
            return get_manager('article_manager', ArticleManager)
    """
    with _registry_lock:
        if manager_name not in _registry:
            _registry[manager_name] = factory()
            logger.debug(f"Registered manager '{manager_name}'")
        return _registry[manager_name]


def register_manager(manager_name: str, instance: T) -> T:
    """Explicitly register a manager instance.

    Use this when you need to register a pre-configured instance
    rather than using a factory function. Replaces any existing entry.

    Args:
        manager_name: Unique key for the manager
        instance: The manager instance to register

    Returns:
        The registered instance
    """
    with _registry_lock:
        _registry[manager_name] = instance
    return instance


def clear_managers(*manager_names: str) -> None:
    """Remove managers from the registry.

    Args:
        *manager_names: Manager keys to clear.
                        If no names provided, clears every manager.
    """
    with _registry_lock:
        if not manager_names:
            _registry.clear()
            return
        for name in manager_names:
            _registry.pop(name, None)


def has_manager(manager_name: str) -> bool:
    return manager_name in _registry


def wire_session(session) -> int:
    """Wire ``session`` into every registered manager.

    Args:
        session: SQLAlchemy Session for the current unit of work

    Returns:
        Number of managers that received the session
    """
    with _registry_lock:
        managers = list(_registry.values())
    for manager in managers:
        manager.set_session(session)
    logger.debug(f"Wired session into {len(managers)} manager(s)")
    return len(managers)
