"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency, plus the transaction scope
used by every mutating domain operation.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from healthtravel.core.config import get_settings
from healthtravel.core.errors import StorageError
from healthtravel.db.schema import Base

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores REFERENCES clauses unless the pragma is set per
    connection.

    Args:
        engine: Engine to instrument.
    """

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _resolve_db_path(db_path: Path | None) -> Path:
    if db_path is None:
        db_path = get_settings().db_path
    return Path(db_path)


def _cache_key(db_path: Path) -> str:
    if str(db_path) == MEMORY_DB:
        return MEMORY_DB
    return str(db_path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path to enable connection pooling.
    Subsequent calls with the same path return the cached engine.

    File databases use SQLAlchemy's default connection pool, so every
    session gets its own connection and SQLite's locking keeps an
    uncommitted transaction invisible to other requests. Only the
    ":memory:" database shares one connection through StaticPool.

    Args:
        db_path: Path to SQLite database file. Defaults to the configured
            db_path setting.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path = _resolve_db_path(db_path)
    cache_key = _cache_key(db_path)

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    if cache_key == MEMORY_DB:
        engine = create_engine(
            "sqlite:///:memory:",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        # Create parent directories only when creating a new engine
        db_path.parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )

    enable_sqlite_foreign_keys(engine)
    _engine_cache[cache_key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Get cached session factory for the database.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        Cached sessionmaker instance.
    """
    db_path = _resolve_db_path(db_path)
    cache_key = _cache_key(db_path)

    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    engine = get_engine(db_path)
    factory = sessionmaker(bind=engine)
    _session_factory_cache[cache_key] = factory

    return factory


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() context manager instead.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    factory = _get_session_factory(db_path)
    return factory()


@contextmanager
def transaction(session: Session) -> Generator[Session, None, None]:
    """Run a block of writes as one all-or-nothing unit.

    Commits on successful exit. Any exception rolls the session back;
    SQLAlchemy failures are re-raised as StorageError, domain errors
    propagate unchanged.

    Args:
        session: Session owning the unit of work.

    Yields:
        The same session.

    Raises:
        StorageError: If the store rejects a statement or the commit.

    Example:
        with transaction(session):
            repo.delete_hospitals_for_city(session, city_id)
            repo.add_hospitals(session, city_id, hospitals)
    """
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Transaction rolled back: {e}")
        raise StorageError("Storage operation failed") from e
    except Exception:
        session.rollback()
        raise


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Args:
        db_path: Path to SQLite database file.

    Yields:
        SQLAlchemy Session instance.

    Example:
        with get_db_session() as session:
            session.add(record)
            # Auto-commits on exit, rolls back on exception
    """
    session = get_session(db_path)
    try:
        with transaction(session):
            yield session
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Initialize database schema.

    Call this once during application startup to create tables.

    Args:
        db_path: Path to SQLite database file.
    """
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
