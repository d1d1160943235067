"""Centralized configuration management for the archdocs system.

This module provides a single source of truth for settings such as the
accepted image extensions, hydration strictness and logging options.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Centralized settings for the archdocs system."""

    # === Image Ingestion ===
    image_extensions: list[str] = Field(
        default_factory=lambda: [".png", ".jpg", ".jpeg", ".gif"],
        description="File extensions picked up when ingesting an image directory",
    )
    atomic_image_ingestion: bool = Field(
        default=False, description="Insert ingested images only if every file in the directory succeeds"
    )

    # === Hydration ===
    strict_hydration: bool = Field(
        default=True, description="Fail hydration when a section refers to an unknown element"
    )

    # === Persistence ===
    snapshot_indent: int = Field(default=2, description="Indentation used when writing JSON snapshots")

    # === Logging Configuration ===
    log_level: str = Field(default="INFO", description="Logging level")
    structured_logging: bool = Field(default=True, description="Enable structured JSON logging")
    log_dir: str = Field(default=".archdocs_logs", description="Directory for the rotating call log")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("image_extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        """Lowercase extensions and make sure each starts with a dot."""
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @property
    def log_path(self) -> Path:
        """Get the log directory as a Path object; it may not exist yet."""
        return Path(self.log_dir).resolve()


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        load_dotenv()  # Load .env file
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset the global settings instance (primarily for testing)."""
    global _settings
    _settings = None
