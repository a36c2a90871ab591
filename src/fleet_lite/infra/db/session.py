from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from fleet_lite.infra.db.config import PoolSettings, database_url

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Pool sizing comes from PoolSettings.from_env(); pre-ping is always on so
    connections dropped by the server are replaced on checkout.
    """
    global _engine
    if _engine is None:
        pool = PoolSettings.from_env()
        _engine = create_engine(
            database_url(),
            pool_size=pool.pool_size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool.pool_recycle,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
