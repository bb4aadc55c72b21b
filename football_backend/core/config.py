from typing import List, Optional

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================
# Global configuration for the football admin backend
# =====================================

INSECURE_JWT_SECRET = "change-me-in-your-env-file"


class Settings(BaseSettings):
    """Application settings loaded from FOOTBALL_* environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix="FOOTBALL_", env_file=".env", extra="ignore")

    app_name: str = "football-backend"
    app_env: str = Field("development", description="development, test or production")

    # Database
    database_url: str = "sqlite:///football.db"                # Sync engine (routes)
    async_database_url: Optional[str] = None                  # Async engine (table creation)
    sql_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Admin tokens
    jwt_secret: str = INSECURE_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(15, gt=0)

    # CORS (FOOTBALL_CORS_ORIGINS is a JSON list)
    cors_origins: List[str] = ["*"]

    # Startup
    auto_seed: bool = False

    # Pagination
    default_per_page: int = Field(10, gt=0)
    max_per_page: int = Field(100, gt=0)

    def resolved_async_database_url(self) -> str:
        """Async URL for table creation; derived from the sync SQLite URL when unset."""
        if self.async_database_url:
            return self.async_database_url
        if self.database_url.startswith("sqlite:"):
            return self.database_url.replace("sqlite:", "sqlite+aiosqlite:", 1)
        return self.database_url


settings = Settings()

# TEST_MODE:
# When True, result processing logs every validated goal at DEBUG level.
TEST_MODE = settings.app_env != "production"

if settings.jwt_secret == INSECURE_JWT_SECRET:
    logger.warning("FOOTBALL_JWT_SECRET is set to the default insecure value. Change it for production!")
