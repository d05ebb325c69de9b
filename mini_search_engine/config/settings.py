"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Mini Search Engine")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    max_results: int = Field(default=10, ge=1)
    max_query_length: int = Field(default=200, ge=1)
    suggestion_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    max_suggestions: int = Field(default=5, ge=0)

    # Index
    max_documents: Optional[int] = Field(default=None, ge=1)
    load_sample_documents: bool = Field(default=True)
    data_file: Optional[str] = Field(default=None)  # title|content|url lines

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_prefix="MINI_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
