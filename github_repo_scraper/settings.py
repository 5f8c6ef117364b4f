"""GitHub token and API host, read from the environment or a .env file.

GITHUB_TOKEN authenticates page requests; GITHUB_API_URL points the scraper
at a GitHub Enterprise host instead of api.github.com.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_API_BASE


class Settings(BaseSettings):
    """Credentials and API host used to build a ClientConfig."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_api_url: str = DEFAULT_API_BASE


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
