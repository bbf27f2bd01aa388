"""Server settings loaded from environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings. Loaded from .env and environment."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    APP_NAME: str = "Hello World Server"

    # Listener (uvicorn)
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Logging (optional)
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached server settings."""
    return Settings()
