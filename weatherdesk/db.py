"""Database configuration and helpers for the WeatherDesk backend."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()

logger = logging.getLogger("weatherdesk.db")


class Storage:
    """Owns the engine and session factory for the history table.

    One instance is opened at process start, shared by every request and
    disposed at shutdown.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.database_url = database_url
        self.engine: Engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False}
            if database_url.startswith("sqlite")
            else {},
        )
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def init_schema(self) -> None:
        """Create database tables if they do not exist."""

        import weatherdesk.db_models  # noqa: F401 - models are imported for side effects

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url.render_as_string())

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""

        db = self._session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")


def open_storage(database_url: str, *, echo: bool = False) -> Storage:
    """Create a storage handle and make sure the schema exists."""

    storage = Storage(database_url, echo=echo)
    storage.init_schema()
    return storage


__all__ = ["Base", "Storage", "open_storage"]
