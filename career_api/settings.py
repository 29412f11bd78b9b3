"""Application settings via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/109.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Overwatch Career API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Redis
    redis_url: str = "redis://localhost:6379/0"
    redis_max_connections: int = Field(
        default=20,
        ge=1,
        description="Upper bound on pooled Redis connections",
    )

    # Origin (career pages)
    origin_base_url: str = "https://overwatch.blizzard.com/en-us/career"
    origin_user_agent: str = DEFAULT_USER_AGENT
    origin_timeout: float = Field(default=30.0, gt=0)

    @field_validator("origin_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Admission control / caching
    max_concurrent_fetches: int = Field(
        default=20,
        ge=1,
        description="Max simultaneous requests against the career page origin",
    )
    profile_cache_ttl: int = Field(
        default=600,
        ge=1,
        description="TTL (seconds) of cached player profiles",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
