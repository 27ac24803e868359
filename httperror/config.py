"""
Package configuration.

Loads settings from environment variables (prefix ``HTTPERROR_``) and
an optional .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_client_errors: Log recognized 4xx errors at WARNING level.
            Server-side failures are always logged.
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTPERROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_client_errors: bool = True


settings = Settings()
