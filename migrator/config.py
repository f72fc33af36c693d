"""Configuration management for the migrator system."""

import logging
import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_DIALECT
from .types import Environment


class Settings(BaseModel):
    """Application settings."""

    # Environment
    version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(
        default=False, description="Whether to also write logs to a rotating file"
    )

    # Generation
    default_dialect: str = Field(
        default=DEFAULT_DIALECT,
        description="Dialect used when no dialect name is given explicitly",
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        # File logging is always on in production
        if self.environment == Environment.PRODUCTION:
            self.log_to_file = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("default_dialect")
    @classmethod
    def validate_default_dialect(cls, v: str) -> str:
        """Normalize the default dialect name."""
        name = v.strip().lower()
        if not name:
            raise ValueError("Default dialect must not be empty")
        return name

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def log_level_value(self) -> int:
        """Get the numeric logging level."""
        level: int = logging.getLevelName(self.log_level)
        return level


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    log_to_file = os.getenv("MIGRATOR_LOG_TO_FILE", "false").lower() in [
        "true",
        "1",
        "yes",
        "on",
    ]

    return Settings(
        environment=Environment(os.getenv("MIGRATOR_ENV", "development")),
        log_level=os.getenv("MIGRATOR_LOG_LEVEL", "INFO"),
        log_to_file=log_to_file,
        default_dialect=os.getenv("MIGRATOR_DEFAULT_DIALECT", DEFAULT_DIALECT),
    )


# Global settings instance
settings = load_settings()
