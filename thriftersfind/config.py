# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./thriftersfind.db"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    SESSION_COOKIE_NAME: str = "session"
    SESSION_EXPIRY_DAYS: int = 7
    COOKIE_SECURE: bool = False

    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def fix_postgres_url(self) -> "Settings":
        # Some hosts hand out postgres:// which SQLAlchemy no longer accepts
        if self.DATABASE_URL.startswith("postgres://"):
            self.DATABASE_URL = self.DATABASE_URL.replace(
                "postgres://", "postgresql://", 1
            )
        return self

    @property
    def secure_cookies(self) -> bool:
        """Session cookies are always Secure in production."""
        return self.COOKIE_SECURE or self.ENVIRONMENT == "production"


settings = Settings()
