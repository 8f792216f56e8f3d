"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="alerthook", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: Literal["json", "console"] = Field(default="json", alias="LOG_FORMAT")

    # Webhook
    webhook_url: str = Field(default="https://api.example.com/testhook", alias="WEBHOOK_URL")
    webhook_key: str = Field(default="abc123", alias="WEBHOOK_KEY")
    webhook_trigger: str = Field(default="no", alias="WEBHOOK_TRIGGER")
    webhook_hash_input: str = Field(default="hello world", alias="WEBHOOK_HASH_INPUT")

    # Network
    net_timeout: float = Field(default=1.0, gt=0, alias="NET_TIMEOUT")
    net_max: int = Field(default=10, ge=0, alias="NET_MAX")
    net_mock: bool = Field(default=False, alias="NET_MOCK")
    user_agent: str = Field(default="alerthook/0.1.0", alias="USER_AGENT")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
