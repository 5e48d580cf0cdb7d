"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Protocol constants live in constants.py and are not configurable: changing
them would change the wire format.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Optional

from .constants import ALPHABETS, DEFAULT_ALPHABET


class LedgerValuesConfig(BaseSettings):
    """Ledger values runtime configuration"""

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Account aliases (JSON file of nickname -> address)
    accounts_file: Optional[str] = None

    # Alphabet used by the command-line encode/decode commands
    default_alphabet: str = DEFAULT_ALPHABET

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got '{value}'")
        return value

    @field_validator("default_alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if value not in ALPHABETS:
            raise ValueError(f"Unknown alphabet '{value}'")
        return value

    class Config:
        env_prefix = "LEDGER_VALUES_"
        env_file = ".env"
        case_sensitive = False
        frozen = True


# Global configuration instance
config = LedgerValuesConfig()


def get_config() -> LedgerValuesConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerValuesConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerValuesConfig()
    return config
