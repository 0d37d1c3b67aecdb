"""Project path configuration."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PathsConfig(BaseSettings):
    """
    Project path configuration.
    All paths are computed from project_root, which defaults to the working
    directory the command runs in (override with PATHS_PROJECT_ROOT).
    """
    model_config = SettingsConfigDict(
        env_prefix='PATHS_',
        case_sensitive=False
    )

    project_root: Path = Field(default_factory=Path.cwd)

    @property
    def data_dir(self) -> Path:
        return self.project_root / "data"

    @property
    def output_dir(self) -> Path:
        """Default location for TableSet JSON snapshots"""
        return self.data_dir / "tables"

    @property
    def logs_dir(self) -> Path:
        return self.project_root / "logs"

    @property
    def dead_letter_path(self) -> Path:
        """Inputs that failed a CLI run"""
        return self.logs_dir / "failed_files.json"

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        for directory in (self.data_dir, self.output_dir, self.logs_dir):
            directory.mkdir(parents=True, exist_ok=True)
