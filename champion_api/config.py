"""Client configuration from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from the environment (prefix CHAMPION_API_)."""

    model_config = SettingsConfigDict(
        env_prefix="CHAMPION_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "http://localhost:3000/v1"
    timeout: float = 30.0  # seconds per request
    connect_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"
