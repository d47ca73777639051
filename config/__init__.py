"""
Config Package - Application configuration, database setup and logging.
"""

from config.settings import Settings, get_settings
from config.database import SessionLocal, Base, get_db, get_engine
from config.logging_setup import setup_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Database
    "SessionLocal",
    "Base",
    "get_db",
    "get_engine",
    # Logging
    "setup_logging",
]
