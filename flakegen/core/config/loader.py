"""
Configuration loader — reads flakegen.yml into generator settings.

The settings file is optional: without one, every setting takes the
default shipped for the typst-tikz flake. When present, it is YAML,
validated against the Pydantic schema.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from flakegen.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "flakegen.yml"


class ConfigError(Exception):
    """Raised when generator configuration is invalid."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for flakegen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to flakegen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to flakegen.yml. If None, returns defaults.

    Returns:
        Validated GeneratorSettings model.

    Raises:
        ConfigError: If an explicit file is missing or invalid.
    """
    if path is None:
        logger.debug("No %s given, using defaults", SETTINGS_FILE)
        return GeneratorSettings()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = GeneratorSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e

    logger.info(
        "Loaded settings from %s (%d toolchain modules)",
        path,
        len(settings.toolchain.modules),
    )
    return settings


def project_root(config_path: Path | None) -> Path:
    """Get the project root directory from a config file path."""
    if config_path is None:
        return Path.cwd().resolve()
    return config_path.parent.resolve()
