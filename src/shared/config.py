"""
Application Settings

Responsibility:
    Read runtime settings from environment variables (and a local .env file)
    into a validated pydantic model.

Environment Variables:
    LOG_LEVEL: Root log level (default "INFO")
    LOG_FORMAT: logging format string
    DEMO_TASK_DESCRIPTION: Description used by the demo entry point (default "Buy milk")

Architecture Notes:
    - Shared module, used only by the entry point (src.main)
    - No global settings instance: callers build one with get_settings()
"""

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """
    Runtime settings.

    Attributes:
        log_level: Upper-cased logging level name
        log_format: Format string passed to logging.basicConfig
        demo_task_description: Task text created by the demo

    Examples:
        >>> Settings(log_level="debug").log_level
        'DEBUG'
        >>> Settings(log_level="verbose")  # raises pydantic.ValidationError
    """

    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT, description="logging format string"
    )
    demo_task_description: str = Field(
        default="Buy milk", description="Description of the task created by the demo"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return level


def get_settings() -> Settings:
    """
    Build Settings from the environment.

    Loads .env from the working directory first (existing environment
    variables take precedence), then maps variables onto Settings fields.
    Unset variables fall back to the model defaults.

    Returns:
        Fresh Settings instance

    Raises:
        pydantic.ValidationError: If LOG_LEVEL is not a known level
    """
    load_dotenv(find_dotenv(usecwd=True))

    values = {
        "log_level": os.getenv("LOG_LEVEL"),
        "log_format": os.getenv("LOG_FORMAT"),
        "demo_task_description": os.getenv("DEMO_TASK_DESCRIPTION"),
    }
    return Settings(**{key: value for key, value in values.items() if value is not None})
