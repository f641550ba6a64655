"""
YAML configuration loader for Country Lookup.
"""

from pathlib import Path
from typing import Any

import yaml

from country_lookup.config.models import LookupConfig

DEFAULT_PATHS = [
    Path("country_lookup.yaml"),
    Path("config/country_lookup.yaml"),
]


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Load a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        yaml.YAMLError: If the YAML is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        return {}

    return raw_config


def load_config(config_path: str | Path | None = None) -> LookupConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to a YAML file. If None, the default locations are
                    searched and built-in defaults are used when none exists.

    Returns:
        Validated LookupConfig object

    Raises:
        FileNotFoundError: If an explicit configuration file is missing
        yaml.YAMLError: If the YAML is invalid
        ValidationError: If configuration is invalid
    """
    config_dict: dict[str, Any] = {}

    if config_path is None:
        for path in DEFAULT_PATHS:
            if path.exists():
                config_dict = load_yaml(path)
                break
    else:
        config_dict = load_yaml(Path(config_path))

    return LookupConfig(**config_dict)

