"""
Configuration module for Vault Weaver MCP Server.

Uses pydantic-settings for configuration management with environment variable support.
Environment variables use OBSIDIAN_ prefix (e.g., OBSIDIAN_VAULT_PATH).
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NOTE_EXTENSION = ".md"

DEFAULT_SEARCH_LIMIT = 10
SEARCH_LIMIT_RANGE = (1, 100)

DEFAULT_GRAPH_DEPTH = 2
GRAPH_DEPTH_RANGE = (1, 5)


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Environment variables:
    - OBSIDIAN_VAULT_PATH: Absolute path to the vault root (required)
    - OBSIDIAN_GRAPH_SEED_LIMIT: Notes used as roots when no root note is given
    - OBSIDIAN_LOG_LEVEL: Minimum log level written to stderr
    """

    vault_path: Path
    graph_seed_limit: int = Field(default=50, ge=1)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="OBSIDIAN_")

    @field_validator("vault_path")
    @classmethod
    def vault_must_be_directory(cls, value: Path) -> Path:
        if not value.is_dir():
            raise ValueError(f"vault path is not a directory: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment once per process.

    Raises:
        pydantic.ValidationError: If OBSIDIAN_VAULT_PATH is unset or invalid
    """
    return Settings()
