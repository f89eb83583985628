"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.shardcache/config.yaml)
  3. Project config   (./shardcache.yaml)
  4. Environment variables (SHARDCACHE_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from shardcache.config.defaults import get_defaults
from shardcache.config.schema import CacheSettings

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".shardcache" / "config.yaml"
_PROJECT_CONFIG_NAME = "shardcache.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "SHARDCACHE_ROOT": "root",
    "SHARDCACHE_LOG_LEVEL": "log_level",
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        config.update(global_cfg)

    # Layer 3: Project config (search from cwd upward)
    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    # Layer 4: Environment variables
    config.update(_load_env_vars())

    # Layer 5: Runtime arguments, only when explicitly set
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    return config


def load_settings(**runtime_overrides: Any) -> CacheSettings:
    """Resolve the hierarchy and validate it into CacheSettings."""
    config = load_config_hierarchy(**runtime_overrides)
    return CacheSettings(root=config["root"], log_level=config["log_level"])


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if isinstance(data, dict):
        return data
    logger.warning("Config file %s is not a mapping, ignoring", path)
    return None


def _find_project_config() -> Path | None:
    """Search for shardcache.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read SHARDCACHE_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value:
            result[config_key] = value
    return result
