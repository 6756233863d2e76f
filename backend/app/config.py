"""Centralised application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    # An empty DATABASE_URL disables every database-backed feature.
    DATABASE_URL: str = "sqlite:///./portfolio_cms.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Comma separated, compared case-insensitively
    ADMIN_EMAILS: str = ""

    # CSV import
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5 MB

    AUDIT_QUERY_LIMIT: int = 100

    def admin_emails(self) -> List[str]:
        return [
            email.strip().lower()
            for email in str(self.ADMIN_EMAILS or "").split(",")
            if email.strip()
        ]

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
