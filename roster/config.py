"""
Configuration settings for the student roster.

Uses Pydantic Settings to load the backing file location and logging options
from environment variables or a `.env` file.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    data_file: Path = Field(Path("students.json"), alias="ROSTER_DATA_FILE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
