"""
Configuration settings for the record semantics demo.

Uses Pydantic Settings to load environment variables (or a local `.env`) for
logging and for how deep by-copy operations duplicate the record.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Demo behaviour
    copy_mode: Literal["shallow", "deep"] = Field("shallow", alias="COPY_MODE")
    show_expectations: bool = Field(True, alias="SHOW_EXPECTATIONS")

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
