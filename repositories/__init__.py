"""
Repository Layer Package

Repositories encapsulate read access to mapped classes. Writes go through
the object managers in managers/.

Key Components:
- BaseRepository: find/find_all/find_by/find_one_by/count/find_by_df over one mapped class
- get_repository: factory for a BaseRepository bound to a session
"""

from repositories.base import BaseRepository, Criteria, OrderBy, get_repository

__all__ = [
    "BaseRepository",
    "Criteria",
    "OrderBy",
    "get_repository",
]
