"""
Configuration for File Console
Central configuration management using Pydantic Settings
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Paths
    files_dir: str = Field(default="files", alias="FILES_DIR")

    # Content entry
    end_sentinel: str = Field(default="END", alias="END_SENTINEL")
    encoding: str = Field(default="utf-8", alias="FILE_ENCODING")

    # Logging (empty = disabled)
    log_level: str = Field(default="", alias="LOG_LEVEL")
    log_file: str = Field(default="", alias="LOG_FILE")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_working_path(settings: Optional[Settings] = None) -> Path:
    """Get the working directory path, relative to the current directory"""
    settings = settings or get_settings()
    return Path(settings.files_dir)


def ensure_working_path(working_path: Path) -> bool:
    """
    Create the working directory if it doesn't exist.

    Returns:
        True if the directory was created, False if it already existed
    """
    if working_path.is_dir():
        return False
    working_path.mkdir(parents=True, exist_ok=True)
    return True


# Application metadata
APP_NAME = "File Console"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Menu-driven text file utility"
