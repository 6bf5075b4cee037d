from contextlib import contextmanager, suppress
import threading
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from logging_config import setup_logging

logger = setup_logging(__name__)

# =============================================================================
# Database Configuration
# =============================================================================

# Serializes engine creation within the process
_ENGINE_LOCK = threading.Lock()


def get_settings():
    from settings_service import SettingsService

    return SettingsService()


class DatabaseConfig:
    """Engine and session factory for one database URL.

    Engines are shared per (URL, echo) across instances so that every
    manager wired against the same database reuses a single connection
    pool. Configs that differ only in ``echo`` get separate engines; for an
    in-memory URL that means separate databases.

    Transaction boundaries live here (``session_scope``), never in managers:
    managers only persist/remove/flush on the session they are given.
    """

    _engines: dict[tuple[str, bool], Engine] = {}

    def __init__(
        self,
        url: Optional[str] = None,
        echo: Optional[bool] = None,
        expire_on_commit: Optional[bool] = None,
    ):
        if url is None or echo is None or expire_on_commit is None:
            settings = get_settings()
            url = settings.database_url if url is None else url
            echo = settings.database_echo if echo is None else echo
            expire_on_commit = (
                settings.expire_on_commit if expire_on_commit is None else expire_on_commit
            )
        self.url = url
        self.echo = echo
        self.expire_on_commit = expire_on_commit
        self._session_factory = None

    @property
    def is_memory(self) -> bool:
        return self.url.startswith("sqlite") and (
            ":memory:" in self.url or self.url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:")
        )

    @property
    def _engine_key(self) -> tuple[str, bool]:
        return (self.url, bool(self.echo))

    @property
    def engine(self) -> Engine:
        eng = DatabaseConfig._engines.get(self._engine_key)
        if eng is not None:
            return eng
        with _ENGINE_LOCK:
            eng = DatabaseConfig._engines.get(self._engine_key)
            if eng is None:
                if self.is_memory:
                    # one shared connection, or every checkout sees an empty database
                    eng = create_engine(
                        self.url,
                        echo=self.echo,
                        poolclass=StaticPool,
                        connect_args={"check_same_thread": False},
                    )
                else:
                    eng = create_engine(self.url, echo=self.echo, pool_pre_ping=True)
                logger.debug(f"Created engine for {eng.url!r}")
                DatabaseConfig._engines[self._engine_key] = eng
        return eng

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                expire_on_commit=self.expire_on_commit,
            )
        return self._session_factory

    def session(self) -> Session:
        """Open a new session. The caller owns commit/rollback/close."""
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session with unit-of-work semantics.

        Commits once when the block exits normally, rolls back on any
        exception (which is re-raised), and always closes the session.
        """
        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            logger.error("Rolling back session after error", exc_info=True)
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self, metadata) -> None:
        """Create every table registered on ``metadata`` that does not exist yet."""
        metadata.create_all(self.engine)
        logger.info(f"Created tables: {sorted(metadata.tables)}")

    def drop_all(self, metadata) -> None:
        metadata.drop_all(self.engine)
        logger.info(f"Dropped tables: {sorted(metadata.tables)}")

    def integrity_check(self) -> bool:
        """Run a trivial round-trip query against the database.

        Returns True if the database answered, False otherwise or on error.
        """
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text("SELECT 1")).scalar()
            return result == 1
        except Exception as e:
            logger.error(f"Integrity check error ({self.url}): {e}")
            return False

    def dispose(self) -> None:
        """Dispose the shared engine for this URL and echo setting and forget it."""
        eng = DatabaseConfig._engines.pop(self._engine_key, None)
        if eng is not None:
            with suppress(Exception):
                eng.dispose()
        self._session_factory = None

    @classmethod
    def dispose_all(cls) -> None:
        for key in list(cls._engines):
            eng = cls._engines.pop(key)
            with suppress(Exception):
                eng.dispose()
