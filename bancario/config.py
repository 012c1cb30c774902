"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BancarioConfig(BaseSettings):
    """Bancario configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANCARIO_",
        env_file=".env",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Account numbering
    account_number_prefix: str = "CONTA"
    account_number_width: int = Field(default=6, ge=1)


# Global configuration instance
config = BancarioConfig()


def get_config() -> BancarioConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BancarioConfig:
    """Reload configuration from environment"""
    global config
    config = BancarioConfig()
    return config
