"""
SQLAlchemy ORM Entity Models

Used by the database storage backend: a plain key-value table holding
JSON documents, one row per storage key.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from config.database import Base


class StoredValue(Base):
    """
    A JSON document stored under a key.

    The checklist keeps its whole item collection in a single row;
    every save overwrites that row (last write wins).
    """
    __tablename__ = "StoredValues"

    Key = Column(String(200), primary_key=True)
    Value = Column(Text, nullable=False)  # JSON-encoded
    UpdatedDate = Column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )
