"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fin-gateway"
    log_level: str = "INFO"

    # Request limits
    max_text_length: int = 500  # characters accepted by the transaction parser


settings = Settings()
