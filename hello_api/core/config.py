"""
Configuration settings for the Hello API service.
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_api import __version__


class Settings(BaseSettings):
    """
    Application settings.
    """
    PROJECT_NAME: str = "Hello API"
    VERSION: str = __version__
    API_PREFIX: str = "/api"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="HELLO_API_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
