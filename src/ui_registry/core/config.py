"""Configuration Management."""

from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_REGISTRY_URL = "https://ui.shadcn.com"


class Settings(BaseSettings):
    """Registry client settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="COMPONENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Registry
    registry_url: str = Field(default=DEFAULT_REGISTRY_URL, description="Registry base URL")
    registry_timeout: float | None = Field(
        default=None, gt=0, description="Request timeout in seconds (None waits indefinitely)"
    )
    https_proxy: str | None = Field(
        default=None,
        validation_alias=AliasChoices("https_proxy", "HTTPS_PROXY"),
        description="HTTPS proxy for all registry requests",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
