"""
OpenAI Schemas Configuration Module

This module manages package settings and environment variables using
pydantic-settings for type-safe configuration management.

Environment variables are loaded from .env file or system environment.
"""

from functools import lru_cache
from typing import Literal
import logging
import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings loaded from environment variables.

    Pydantic Settings automatically reads from:
    1. Environment variables
    2. .env file in working directory
    3. Default values defined here
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Package log level"
    )

    omit_null_tool_output_fields: bool = Field(
        default=False,
        description="Drop absent tool_call_id/output keys instead of encoding null",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Returns cached settings instance.

    Returns:
        Settings: The settings singleton.
    """
    return Settings()


def configure_logging(settings: Settings) -> None:
    """
    Configure logging based on settings.

    Args:
        settings: The settings instance.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
