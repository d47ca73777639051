"""
SQLAlchemy engine and session factory.

Only the database storage backend touches this module; the engine is
created lazily on first use so browser-only deployments never open a
database file.
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config.settings import get_settings


class Base(DeclarativeBase):
    pass


@lru_cache
def get_engine() -> Engine:
    """Engine for the configured DATABASE_URL, tables created on first call."""
    settings = get_settings()
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # Streamlit reruns scripts on different threads
        connect_args["check_same_thread"] = False

    engine = create_engine(settings.database_url, connect_args=connect_args)

    # Register entities before create_all
    import models.entities  # noqa: F401
    Base.metadata.create_all(engine)
    return engine


def SessionLocal() -> Session:
    """Open a new session bound to the configured engine."""
    return sessionmaker(bind=get_engine(), autoflush=False)()


def get_db():
    """Yield a session and always close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
