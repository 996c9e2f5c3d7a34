"""
Configuration loader — reads csvfixtures.yml into a Settings model.

The file is optional.  When present it is parsed with PyYAML,
validated against the Pydantic schema, and its directory becomes the
base for relative output paths.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from csv_fixtures.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "csvfixtures.yml"


class ConfigError(Exception):
    """Raised when the fixture configuration is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for csvfixtures.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to csvfixtures.yml, or None if not found.
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


def load_settings(path: Path | None = None, base_dir: Path | None = None) -> Settings:
    """Load and validate fixture settings.

    Args:
        path: Explicit path to csvfixtures.yml.  If None, searches upward
            from ``base_dir`` (or cwd); no file found means defaults.
        base_dir: Directory relative output paths resolve against when
            no config file is used.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file(base_dir)
        if path is None:
            root = (base_dir or Path.cwd()).resolve()
            logger.debug("No %s found — using defaults (base=%s)", CONFIG_FILE, root)
            return Settings(base_dir=str(root))
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading fixture config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    data.setdefault("base_dir", str(path.parent.resolve()))

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid fixture configuration: {e}") from e

    logger.info("Loaded settings from %s (output=%s)", path, settings.output_path)
    return settings
