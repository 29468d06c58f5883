"""Configuration management for go links."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    data_file: str = Field(
        default="data/links.json",
        description="Path of the JSON file holding all links"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3001,
        description="Port to listen on"
    )

    # Display settings
    link_prefix: str = Field(
        default="go/",
        description="Prefix shown before each shortcut on the homepage"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
