"""
Pytest configuration file for the object manager project.
This file sets up the Python path so tests can import modules from the project root,
and provides an in-memory SQLite session with the test models' tables created.
"""
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from domain.models import Base  # noqa: E402
import fixture_models  # noqa: E402,F401 — registers test tables on Base.metadata


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables, one connection shared by every checkout."""
    eng = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine, expire_on_commit=False) as s:
        yield s
        s.rollback()


@pytest.fixture
def manager(session):
    return fixture_models.RecordingWidgetManager(session)


@pytest.fixture(autouse=True)
def _reset_registry():
    from state import clear_managers
    from settings_service import clear_settings_cache

    yield
    clear_managers()
    clear_settings_cache()
