"""
Database storage backend.

Stores JSON documents in the StoredValues table through SQLAlchemy.
Works with any database SQLAlchemy supports; SQLite by default.
"""

import json
import logging
from typing import Any, Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.database import SessionLocal
from models.entities import StoredValue
from services.storage.base import StorageError, StorageGateway

logger = logging.getLogger(__name__)


class DatabaseStorage(StorageGateway):
    """Key-value storage on top of a SQLAlchemy session factory."""

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self._session_factory = session_factory

    @property
    def backend_name(self) -> str:
        return "database"

    async def get(self, key: str) -> Optional[Any]:
        db = self._session_factory()
        try:
            record = db.get(StoredValue, key)
            if record is None:
                return None
            return json.loads(record.Value)
        except SQLAlchemyError as e:
            logger.error(f"Database read failed for key '{key}': {e}")
            raise StorageError(f"Could not read '{key}' from the database") from e
        except json.JSONDecodeError as e:
            logger.error(f"Stored value for key '{key}' is not valid JSON: {e}")
            raise StorageError(f"Stored value for '{key}' is corrupted") from e
        finally:
            db.close()

    async def set(self, key: str, value: Any) -> None:
        encoded = json.dumps(value, ensure_ascii=False)
        db = self._session_factory()
        try:
            record = db.get(StoredValue, key)
            if record:
                record.Value = encoded
            else:
                db.add(StoredValue(Key=key, Value=encoded))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database write failed for key '{key}': {e}")
            raise StorageError(f"Could not save '{key}' to the database") from e
        finally:
            db.close()
