"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ProviderConfig(BaseSettings):
    """Configuration for the Discord provider adapter."""

    # Provider hosts
    api_base_url: str = "https://discordapp.com/api"
    cdn_base_url: str = "https://cdn.discordapp.com"

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "DISCAUTH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
