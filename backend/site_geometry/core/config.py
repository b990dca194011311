"""Application settings and configuration management.

This module provides Pydantic-based settings management that loads
configuration from environment variables or a .env file. Settings include
the front-end base URL used for links in the EMP payload, the number of
vertices sampled on circular site boundaries, and logging options.

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from site_geometry.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.front_end_base_url)

    Environment variables can override defaults:
        >>> FRONT_END_BASE_URL=https://marine-licensing.example.gov.uk
        >>> CIRCLE_VERTEX_COUNT=120
        >>> LOG_LEVEL=DEBUG
"""

import functools
import logging

import pydantic
import pydantic_settings

from site_geometry.core import constants


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        front_end_base_url: Base URL of the applicant-facing front end.
        circle_vertex_count: Vertices sampled on a circle boundary before
            the ring is closed.
        log_level: Name of the root logging level.
        log_format: Format string passed to logging.basicConfig.

    Example:
        Create settings with custom values:
            >>> settings = Settings(
            ...     front_end_base_url="https://example.gov.uk",
            ...     circle_vertex_count=120,
            ... )
    """

    front_end_base_url: str = "http://localhost:3000"
    circle_vertex_count: int = pydantic.Field(
        default=constants.DEFAULT_CIRCLE_VERTEX_COUNT,
        ge=3,
    )
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @pydantic.field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the process. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with all configuration values populated.
    """
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings.

    Intended to be called once by the host application at start up.

    Args:
        settings: Settings providing the level and format.
    """
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
