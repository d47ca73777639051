"""
Application settings loaded from environment variables (and a .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Storage gateway: "browser" (localStorage), "database" or "memory"
    storage_backend: str = "browser"
    storage_key: str = "guardaCoisas"  # Single key holding the whole item list

    # Only used by the database backend
    database_url: str = "sqlite:///guarda_coisas.db"

    # Quantity selector offers 1..max_quantity
    max_quantity: int = 20

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
