"""Record projection configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tablesplit.config._loader import load_config_section


def _get_config() -> dict:
    return load_config_section("projection")


class ProjectionConfig(BaseSettings):
    """Projection configuration settings."""
    model_config = SettingsConfigDict(
        env_prefix='PROJECTION_',
        case_sensitive=False
    )

    fail_fast: bool = Field(
        default_factory=lambda: _get_config().get('fail_fast', True),
        description="Abort a table on the first row that fails coercion"
    )
