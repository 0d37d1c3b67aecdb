"""
Cached loader for configs/config.yaml.

The file holds one top-level mapping per settings section (segmentation,
projection). Point TABLESPLIT_CONFIG at another YAML file to replace it.

Usage:
    from tablesplit.config._loader import load_config_section

    segmentation = load_config_section("segmentation")
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "TABLESPLIT_CONFIG"


def config_path() -> Path:
    """YAML file backing the settings defaults."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent / "configs" / "config.yaml"


@lru_cache(maxsize=4)
def _load(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_config_section(section: str) -> dict[str, Any]:
    """
    Return one top-level section of the config file

    Missing files and missing sections both give an empty dict, so every
    setting falls back to its coded default.
    """
    return _load(config_path()).get(section) or {}


def clear_config_cache() -> None:
    """Forget parsed files so the next lookup rereads them."""
    _load.cache_clear()
