"""Database engine, session factory and declarative base."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rentaldb.config import settings


class Base(DeclarativeBase):
    """Declarative base for all models."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite ignores foreign keys unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(
    url: str | None = None,
    echo: bool | None = None,
    enforce_foreign_keys: bool = True,
) -> Engine:
    """Create an engine for the booking database.

    In-memory SQLite databases share a single connection so every session
    sees the same data.
    """
    url = url or settings.database_url
    echo = settings.sql_echo if echo is None else echo
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        if enforce_foreign_keys:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(url, echo=echo, pool_pre_ping=True)


@lru_cache
def get_engine() -> Engine:
    """Get cached engine for the configured database."""
    return create_db_engine()


def get_session_factory(engine: Engine | None = None) -> sessionmaker[Session]:
    """Session factory bound to ``engine`` or the configured engine."""
    return sessionmaker(bind=engine or get_engine(), autoflush=False, expire_on_commit=False)


@contextmanager
def get_db_context(engine: Engine | None = None) -> Generator[Session, None, None]:
    """Session scope that commits on success and rolls back on error."""
    session = get_session_factory(engine)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine | None = None) -> None:
    """Create all tables."""
    import rentaldb.models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def drop_db(engine: Engine | None = None) -> None:
    """Drop all tables."""
    import rentaldb.models  # noqa: F401

    Base.metadata.drop_all(bind=engine or get_engine())
