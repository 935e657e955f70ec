from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    # Neon/Vercel deployments only export POSTGRES_URL
    database_url: str = Field(
        default="sqlite:///data/journal.db",
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL", "database_url"),
    )
    database_sslmode: Optional[str] = Field(default=None, alias="DATABASE_SSLMODE")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, alias="DB_MAX_OVERFLOW")

    data_dir: Path = Field(default=Path("data"), alias="DATA_DIR")
    logs_dir: Path = Field(default=Path("logs"), alias="LOGS_DIR")

    cors_allow_origins_str: str = Field(default="*", alias="ALLOW_ORIGINS")

    # Webhook ingestion
    webhook_secret: str = Field(
        default="webhook-secret-2024", alias="TRADINGVIEW_WEBHOOK_SECRET"
    )
    webhook_rate_limit: str = Field(default="60/minute", alias="WEBHOOK_RATE_LIMIT")
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    enable_test_webhook: bool = Field(default=True, alias="ENABLE_TEST_WEBHOOK")

    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    @property
    def cors_allow_origins(self) -> List[str]:
        """Get CORS allowed origins as a list."""
        return [
            item.strip() for item in self.cors_allow_origins_str.split(",") if item.strip()
        ] if self.cors_allow_origins_str else ["*"]


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.logs_dir.mkdir(parents=True, exist_ok=True)
    return settings
