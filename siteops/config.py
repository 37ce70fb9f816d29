"""Centralized application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./siteops.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    LOG_LEVEL: str = "INFO"

    # Actor tokens are issued by the session system and share SECRET_KEY
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Dashboard
    RECENT_ACTIVITY_DAYS: int = 7

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
