"""
config.py
- Defines global configuration values derived from environment variables.
- Merges them with the optional YAML settings file into a Settings object.
- Configures loguru once for the whole process.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from appmeta.core.config_loader import load_yaml, preview_yaml
from appmeta.core.constants import DEFAULT_CACHE_HOST, DEFAULT_CACHE_PORT, DEFAULT_NODE_LABELS
from appmeta.core.exceptions import ConfigError

# --- Runtime Behavior Flags ---
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# --- Logging ---
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# --- Config Paths ---
CONFIG_FILE = os.getenv("APP_META_CONFIG", "/etc/app-meta/config.yml")


def configure_logging(debug=DEBUG):
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level="DEBUG" if debug else "INFO",
        format=LOG_FORMAT,
        colorize=True,
    )


@dataclass
class Settings:
    cache_host: str = DEFAULT_CACHE_HOST
    cache_port: int = DEFAULT_CACHE_PORT
    cache_timeout: Optional[float] = None
    node_labels: List[str] = field(default_factory=lambda: list(DEFAULT_NODE_LABELS))
    dry_run: bool = False


def _as_int(name, value):
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _as_float(name, value):
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got {value!r}") from e


def load_settings(config_path=None, dry_run=None, environ=None):
    """
    Resolve runtime settings.

    Precedence is CLI flag > environment variable > YAML file > default.

    Args:
        config_path (str): YAML settings file. Defaults to APP_META_CONFIG.
        dry_run (bool): CLI override for the write stage; None defers to DRY_RUN.
        environ (Mapping): Environment to read. Defaults to os.environ.

    Returns:
        Settings: The merged settings.
    """
    env = os.environ if environ is None else environ
    path = config_path or env.get("APP_META_CONFIG", CONFIG_FILE)
    preview_yaml(path, name="app-meta settings")
    data = load_yaml(path)
    cache = data.get("cache") or {}
    if not isinstance(cache, dict):
        raise ConfigError(f"'cache' in {path} must be a mapping")

    settings = Settings()

    host = env.get("APP_META_CACHE_HOST") or cache.get("host")
    if host:
        settings.cache_host = str(host)

    port = env.get("APP_META_CACHE_PORT") or cache.get("port")
    if port is not None:
        settings.cache_port = _as_int("cache port", port)

    timeout = env.get("APP_META_CACHE_TIMEOUT") or cache.get("timeout")
    if timeout is not None:
        settings.cache_timeout = _as_float("cache timeout", timeout)

    labels = data.get("node_labels")
    if labels is not None:
        if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
            raise ConfigError(f"'node_labels' in {path} must be a list of strings")
        settings.node_labels = labels

    if dry_run is None:
        dry_run = env.get("DRY_RUN", "false").lower() == "true"
    settings.dry_run = bool(dry_run)

    logger.debug(f"[config] Resolved settings: {settings}")
    return settings
