from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="WhatsApp Group Directory",
        description="Application name",
    )
    database_url: str = Field(
        default=(
            "postgresql+asyncpg://group_directory:group_directory"
            "@postgres:5432/group_directory"
        ),
        description="PostgreSQL database connection URL",
    )
    storage_backend: Literal["memory", "database"] = Field(
        default="memory",
        description="Where groups and users are kept",
    )
    seed_sample_data: bool = Field(
        default=True,
        description="Seed sample groups into an empty store on startup",
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    metadata_timeout: float = Field(
        default=10.0,
        description="Seconds to wait when fetching a group invite page",
    )
    metadata_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow both DATABASE_URL and database_url
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
