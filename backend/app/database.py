"""SQLAlchemy engine and session binding.

``engine`` and ``SessionLocal`` are ``None`` when ``DATABASE_URL`` is empty.
Callers branch on :func:`is_configured` (or on a ``None`` session from
:func:`get_db`) instead of touching a missing handle.
"""

import logging
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_datastore_engine(url: Optional[str]) -> Optional[Engine]:
    url = (url or "").strip()
    if not url:
        logger.warning("[database] DATABASE_URL is not configured. Database-backed features are disabled.")
        return None
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = create_datastore_engine(settings.DATABASE_URL)
SessionLocal = (
    sessionmaker(autocommit=False, autoflush=False, bind=engine)
    if engine is not None
    else None
)


def is_configured() -> bool:
    return SessionLocal is not None


def get_db() -> Iterator[Optional[Session]]:
    if SessionLocal is None:
        yield None
        return
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
