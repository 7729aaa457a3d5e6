"""Configuration handling for Word Counter."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WordCounterSettings(BaseSettings):
    """Word Counter configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # HTTP Server Configuration
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    environment: Literal["development", "production"] = "production"
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["rich", "json", "rich_json"] = "rich"

    # Upload Validation
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)  # 5 MB
    allowed_extensions: list[str] = [".txt"]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:  # type: ignore
        """Validate log level is a valid logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Lower-case extensions and make sure each starts with a dot."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("At least one allowed extension is required")
        return normalized


# Global settings instance
settings = WordCounterSettings()
