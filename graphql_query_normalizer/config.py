"""Configuration management for gqn."""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

import yaml

from . import utils

DEFAULT_MAX_DEPTH = 128


@dataclass
class Config:
    """Configuration for gqn."""

    max_depth: int = DEFAULT_MAX_DEPTH
    max_tokens: Optional[int] = None
    no_location: bool = False
    legacy_mutation_check: bool = False
    log_level: str = "WARNING"


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path("~/.graphql-normalizer/config.yaml")


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.

    Raises:
        ValueError: If log_level is not a known logging level
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Return defaults if config doesn't exist
    if not utils.exists(config_path):
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    log_level = str(data.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log_level {log_level!r} in {config_path}")

    # Merge with defaults
    return Config(
        max_depth=data.get("max_depth", DEFAULT_MAX_DEPTH),
        max_tokens=data.get("max_tokens"),
        no_location=data.get("no_location", False),
        legacy_mutation_check=data.get("legacy_mutation_check", False),
        log_level=log_level,
    )


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    utils.ensure_dir(utils.dirname(path))

    example = asdict(Config(max_tokens=10000))

    with open(path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)

    return path
