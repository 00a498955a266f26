"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Settings cover diagnostics only; arithmetic takes every parameter explicitly.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class CheckedLedgerConfig(BaseSettings):
    """Checked ledger arithmetic configuration"""

    model_config = SettingsConfigDict(
        env_prefix="CHECKED_LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    logger_name: str = "checked_ledger"


# Global configuration instance
config = CheckedLedgerConfig()


def get_config() -> CheckedLedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> CheckedLedgerConfig:
    """Reload configuration from environment"""
    global config
    config = CheckedLedgerConfig()
    return config
