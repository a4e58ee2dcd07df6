"""Validator configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validator settings loaded from environment variables."""

    # Sanitization
    DEEP_LEVEL: int = 100

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Reference service
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
