"""
Core configuration management for textcell.

This module provides centralized configuration management using Pydantic settings
with support for environment variables, type validation, and defaults for the
text engine. All settings can be overridden with ``TEXTCELL_``-prefixed
environment variables or a ``.env`` file.

Classes:
    Settings: Main configuration class with all application settings

Example:
    >>> from textcell.core.config.settings import Settings
    >>> settings = Settings()
    >>> print(settings.DEFAULT_ENCODING)
    UTF-8

Configuration Sections:
    - Application: Basic app configuration (name, version, environment)
    - Text: Default encoding and similarity threshold for TextValue
    - Logging: Application logging configuration
"""

import codecs
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        APP_NAME: Application name identifier
        APP_VERSION: Current application version
        ENVIRONMENT: Deployment environment (development/testing/production)
        DEBUG: Enable debug mode with rich console logging

        DEFAULT_ENCODING: Process-wide default text encoding, used when a
            TextValue is created with ``encoding=None``
        SIMILARITY_THRESHOLD: Default minimum percentage for is_similar()

        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Log format (json/text)
        LOG_FILE_PATH: Path for log file output (optional)

    Example:
        >>> settings = Settings(DEFAULT_ENCODING="latin-1")
        >>> print(settings.DEFAULT_ENCODING)
        latin-1
    """

    # Application
    APP_NAME: str = "textcell"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "production"
    DEBUG: bool = False

    # Text engine
    DEFAULT_ENCODING: str = "UTF-8"
    SIMILARITY_THRESHOLD: float = 80.0

    # Logging Configuration
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"
    LOG_FILE_PATH: Optional[str] = None

    @field_validator("DEFAULT_ENCODING")
    @classmethod
    def validate_default_encoding(cls, v: str) -> str:
        """
        Validate the default encoding against the codec registry.

        Args:
            v (str): The encoding label to validate

        Returns:
            str: The label unchanged, once known to the codec registry

        Raises:
            ValueError: If no codec is registered under the label
        """
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"DEFAULT_ENCODING '{v}' is not a known codec")
        return v

    @field_validator("SIMILARITY_THRESHOLD")
    @classmethod
    def validate_similarity_threshold(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError("SIMILARITY_THRESHOLD must be between 0 and 100")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept a standard level name in any case; store it upper-cased."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of: {sorted(LOG_LEVELS)}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_prefix="TEXTCELL_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance"""
    return Settings()


settings = Settings()
