"""Row reading and table segmentation configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tablesplit.config._loader import load_config_section


def _get_config() -> dict:
    return load_config_section("segmentation")


class SegmentationConfig(BaseSettings):
    """Segmentation configuration settings."""
    model_config = SettingsConfigDict(
        env_prefix='SEGMENTATION_',
        case_sensitive=False
    )

    blank_run_length: int = Field(
        default_factory=lambda: _get_config().get('blank_run_length', 3),
        ge=1,
        description="Consecutive blank rows that terminate a table"
    )
    delimiter: str = Field(
        default_factory=lambda: _get_config().get('delimiter', ','),
        min_length=1,
        max_length=1
    )
    quotechar: str = Field(
        default_factory=lambda: _get_config().get('quotechar', '"'),
        min_length=1,
        max_length=1
    )
    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', 'utf-8')
    )
