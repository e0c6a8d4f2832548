"""
Application configuration settings.
Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Digital Will Registry"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False  # SQLAlchemy echoes queries when True
    LOG_LEVEL: str = "INFO"

    # Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"

    # Database
    DATABASE_URL: str = f"sqlite:///{DATA_DIR / 'wills.db'}"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from .env that aren't in the model


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
