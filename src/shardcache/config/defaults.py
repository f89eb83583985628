"""Package-level default configuration values."""

from __future__ import annotations

from pathlib import Path
from typing import Any

# Default cache location
DEFAULT_CACHE_ROOT = Path.home() / ".shardcache" / "cache"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "root": DEFAULT_CACHE_ROOT,
        "log_level": DEFAULT_LOG_LEVEL,
    }
