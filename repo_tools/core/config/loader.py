"""
Configuration loader — reads repo-tools.yml into GeneratorSettings.

The file is optional. When present, its directory is the target root
and its values override the generator defaults. Values may sit at the
top level or under an ``openapi:`` key.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from repo_tools.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "repo-tools.yml"


class ConfigError(Exception):
    """Raised when repo-tools configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for repo-tools.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to repo-tools.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load generator settings.

    Args:
        path: Explicit path to repo-tools.yml. If None, defaults are returned.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if path is None:
        return GeneratorSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading repo-tools config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return GeneratorSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    settings_data = data.get("openapi", data)
    if not isinstance(settings_data, dict):
        raise ConfigError(f"Expected 'openapi' to be a mapping in {path}")

    try:
        settings = GeneratorSettings.model_validate(settings_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid repo-tools configuration: {e}") from e

    logger.info("Loaded repo-tools settings from %s", path)
    return settings


def target_root(config_path: Path | None) -> Path:
    """Get the target root directory from an optional config file path."""
    if config_path is None:
        return Path.cwd().resolve()
    return config_path.parent.resolve()
