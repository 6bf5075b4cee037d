"""
State Management Module

Process-wide registry of object managers:
- get_manager, register_manager, clear_managers, has_manager
- wire_session: hand one Session to every registered manager

Usage:
    from state import get_manager, wire_session
"""

from state.service_registry import (
    get_manager,
    register_manager,
    clear_managers,
    has_manager,
    wire_session,
)

__all__ = [
    'get_manager',
    'register_manager',
    'clear_managers',
    'has_manager',
    'wire_session',
]
