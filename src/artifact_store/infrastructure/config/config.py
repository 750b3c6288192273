"""
Environment configuration for the artifact store.

Loads configuration from environment variables (prefix ARTIFACT_STORE_) and
an optional .env file using pydantic-settings.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACT_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Artifact Store")
    app_version: str = Field(default="0.1.0")

    # Store
    state_dir: Path = Field(
        default=Path("./state"),
        description="Store root holding one directory per project",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535, description="HTTP API port")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(
        default="text", description="text for human-readable, json for structured logs"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    Get the settings singleton.

    lru_cache makes sure the environment is only read once.
    """
    return Settings()
