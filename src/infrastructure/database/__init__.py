"""
Database Infrastructure
=======================

Manages database connections, session lifecycle, and engine configuration.

Uses SQLAlchemy 2.0 in synchronous mode; the catalogs are plain blocking calls.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    All models inherit from this class.
    """
    pass


# Global engine and session maker
_engine: Engine | None = None
_session_maker: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get the database engine.

    Raises:
        RuntimeError: If engine has not been initialized
    """
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_database() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get the session maker bound to the initialized engine."""
    if _session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return _session_maker


def init_database(
    database_url: str,
    echo: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
) -> Engine:
    """
    Initialize the database engine and session maker.

    Should be called once during application startup. In-memory SQLite
    databases are kept on a single shared connection so every session sees
    the same tables.

    Returns:
        Engine: The initialized engine
    """
    global _engine, _session_maker

    if _engine is not None:
        _engine.dispose()

    if database_url.startswith("sqlite"):
        engine_kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs = {
            "pool_size": pool_size,
            "max_overflow": max_overflow,
            "pool_pre_ping": True,  # Verify connections before using
        }

    _engine = create_engine(database_url, echo=echo, **engine_kwargs)

    _session_maker = sessionmaker(
        bind=_engine,
        class_=Session,
        expire_on_commit=False,  # Entities stay readable after commit
        autoflush=False,
    )

    return _engine


def close_database() -> None:
    """
    Dispose of the engine and its connections.

    Should be called during application shutdown.
    """
    global _engine, _session_maker

    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_maker = None


@contextmanager
def session_scope(
    session_factory: Optional[sessionmaker[Session]] = None,
) -> Iterator[Session]:
    """
    Context manager for a unit of work.

    Commits when the block finishes, rolls back and re-raises on error.

    Usage:
        with session_scope() as session:
            session.add(model)

    Yields:
        Session: SQLAlchemy session
    """
    factory = session_factory or get_session_factory()

    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


def create_tables() -> None:
    """
    Create all database tables.

    Intended for development and tests; real deployments should migrate.
    """
    # Models must be imported so their tables are registered on Base.metadata
    import exams.infrastructure.models  # noqa: F401

    Base.metadata.create_all(get_engine())
