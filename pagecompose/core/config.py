"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "Page Compose"
    DEBUG: bool = False

    # Storage
    DATABASE_URL: str = "sqlite:///./pagecompose.db"

    # Cache
    CACHE_BACKEND: str = "memory"  # memory | redis
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_TTL_SECONDS: int = 600
    PAGE_INFO_CACHE_KEY: str = "page_info:{site_id}:{page_id}:{language_id}"

    # Rendering placeholders until themes are configurable
    DEFAULT_THEME: str = "Default"
    DEFAULT_TEMPLATE: str = "Default"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


settings = Settings()
