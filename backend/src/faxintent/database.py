"""Database engine and session factory for audit storage.

Only the database audit backend touches the database; the decision logic
itself never does.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models.base import Base


def create_audit_engine(database_url: str) -> Engine:
    """Create an engine for the audit database.

    Pool settings only apply to non-SQLite databases.
    """
    engine_kwargs = {
        "pool_pre_ping": True,
        "echo": False,
    }
    if not database_url.startswith("sqlite"):
        engine_kwargs["pool_size"] = 5
        engine_kwargs["max_overflow"] = 10

    return create_engine(database_url, **engine_kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_audit_schema(engine: Engine) -> None:
    """Create the audit tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def get_db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for database sessions.

    Usage:
        with get_db_session(SessionLocal) as session:
            session.add(entry)

    Automatically commits on success, rolls back on exception.
    """
    session = session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
