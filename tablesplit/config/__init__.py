"""
tablesplit Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml
3. Automatically override with environment variables from .env

Usage:
    from tablesplit.config import settings

    # Terminator length for the segmenter
    run_length = settings.segmentation.blank_run_length

    # Fail-fast projection
    fail_fast = settings.projection.fail_fast
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tablesplit.config.paths import PathsConfig
from tablesplit.config.segmentation import SegmentationConfig
from tablesplit.config.projection import ProjectionConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from tablesplit.config import settings

        settings.paths.dead_letter_path
        settings.segmentation.delimiter
        settings.projection.fail_fast
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Utility Functions
# ===========================

ensure_directories = settings.paths.ensure_directories


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "ensure_directories",
    "PathsConfig",
    "SegmentationConfig",
    "ProjectionConfig",
]
