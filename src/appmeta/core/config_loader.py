"""
config_loader.py
- Loads and previews the optional YAML settings file for app-meta.
- Supports cache address overrides and the list of node labels to copy.
"""

import os
import yaml
from loguru import logger

from appmeta.core.exceptions import ConfigError


def load_yaml(path):
    """
    Load a YAML file and return a parsed dict.

    A missing file yields {} so the tool runs on defaults. A file that exists
    but cannot be read or parsed raises ConfigError.
    """
    if not path or not os.path.exists(path):
        logger.debug(f"[config] No settings file at {path}, using defaults.")
        return {}

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to load settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"settings file {path} must contain a mapping, got {type(data).__name__}")
    return data


def preview_yaml(path, name=None):
    """
    Log a human-readable preview of the YAML file contents for debugging.
    """
    if not path or not os.path.exists(path):
        return

    try:
        with open(path, "r") as f:
            contents = f.read()
    except OSError as e:
        logger.warning(f"[config] Could not preview {path}: {e}")
        return

    logger.debug(f"\n📄 Loaded {name or path}:\n" + "\n".join(f"│ {line}" for line in contents.strip().splitlines()))
