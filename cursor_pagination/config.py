"""Configuration management for cursor pagination."""

import logging
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pagination settings with environment variable support."""
    
    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    # Cursor settings
    cursor_temporal_fields: List[str] = ["created_at"]
    unique_sort_fields: bool = False
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get pagination settings."""
    return settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    config = config or get_settings()
    logging.basicConfig(level=config.log_level, format=config.log_format)
    logging.getLogger().setLevel(getattr(logging, config.log_level))
