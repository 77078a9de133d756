"""Application configuration via environment variables.

Rule limits are constants in validators/reference_data.py, not settings.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from PWCHECK_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Evaluation
    DIAGNOSTIC_MODE: bool = False

    model_config = {"env_prefix": "PWCHECK_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
