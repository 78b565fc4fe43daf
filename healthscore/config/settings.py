from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8081",
]


class Settings(BaseSettings):
    """Service settings, read from HEALTHSCORE_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="HEALTHSCORE_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Path("./data")
    history_limit: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Number of most recent analyses kept in history",
    )
    benchmarks_file: Optional[Path] = Field(
        default=None,
        description="JSON file with benchmark overrides applied to every analysis",
    )
    fallback_annual_revenue: float = Field(
        default=500_000,
        ge=0,
        description="Annual revenue baseline used when a request gives none",
    )
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.copy())
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
