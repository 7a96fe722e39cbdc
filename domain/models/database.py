"""
Database engine and schema lifecycle.
"""

import logging
import os
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from app.config import settings
from app.exceptions import PersistenceError

logger = logging.getLogger("chipotle.database")

# Create SQLAlchemy Base
Base = declarative_base()

FAST_LOAD_PRAGMAS = ("PRAGMA synchronous = OFF", "PRAGMA journal_mode = OFF")


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite connections may be used from worker threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url, echo=echo, future=True, connect_args=connect_args
    )


# Create engine
engine = build_engine(settings.database_url, settings.db_echo)


def _sqlite_file(bind: Engine):
    url = bind.url
    if url.get_backend_name() != "sqlite":
        return None
    if not url.database or url.database == ":memory:":
        return None
    return url.database


def reset_database(bind: Engine = engine):
    """Drop the previous store so the run starts clean"""
    path = _sqlite_file(bind)
    if path is not None:
        bind.dispose()
        try:
            os.remove(path)
            logger.info("Removed previous database file %s", path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise PersistenceError(
                f"error removing old database: {exc}", details={"path": path}
            ) from exc
        return

    try:
        Base.metadata.drop_all(bind=bind)
    except SQLAlchemyError as exc:
        raise PersistenceError(f"error dropping tables: {exc}") from exc
    logger.info("Dropped existing tables")


def init_database(bind: Engine = engine):
    """Initialize database schema"""
    try:
        with bind.begin() as conn:
            Base.metadata.create_all(bind=conn)
    except SQLAlchemyError as exc:
        raise PersistenceError(f"error creating table: {exc}") from exc
    logger.info("Database tables created successfully")


@contextmanager
def fast_load(bind: Engine = engine, enabled: bool = True):
    """
    Relax SQLite durability while bulk loading.

    SQLite pragmas are per connection, so they are applied to every connection
    opened inside the block; the pool is recycled on entry and exit so no
    connection outlives the setting it was opened with. Other backends are
    left untouched.
    """
    if not enabled or bind.dialect.name != "sqlite":
        yield
        return

    def _apply_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            for pragma in FAST_LOAD_PRAGMAS:
                cursor.execute(pragma)
        finally:
            cursor.close()

    logger.info("Setting database pragmas to speed up insertion...")
    bind.dispose()
    event.listen(bind, "connect", _apply_pragmas)
    try:
        yield
    finally:
        event.remove(bind, "connect", _apply_pragmas)
        # Fresh connections come back with synchronous = FULL, journal_mode = DELETE
        bind.dispose()
        logger.info("Reset database pragmas")

