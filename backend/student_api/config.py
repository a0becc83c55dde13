"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'app.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL") or self._build_database_url()
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _build_database_url(self) -> str:
        """Assemble a URL from the `DB_*` parts, or fall back to local SQLite."""
        host = os.getenv("DB_HOST")
        if not host:
            return DEFAULT_DB_URL
        driver = os.getenv("DB_DRIVER", "postgresql")
        port = os.getenv("DB_PORT", "5432")
        user = os.getenv("DB_USER", "postgres")
        password = os.getenv("DB_PASSWORD", "")
        name = os.getenv("DB_NAME", "students")
        credentials = f"{user}:{password}" if password else user
        return f"{driver}://{credentials}@{host}:{port}/{name}"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def _validate(self):
        if self.ENV != "dev" and self.DATABASE_URL == DEFAULT_DB_URL:
            raise RuntimeError("DATABASE_URL or DB_HOST must be set in non-dev environments")


settings = Settings()
